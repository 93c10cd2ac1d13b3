[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellkit"
version = "0.1.0"
description = "Building blocks for a small POSIX-style shell: environment handling, builtins, redirections, here-documents and command execution"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "environment", "heredoc", "redirection", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellkit"]

[tool.hatch.build.targets.sdist]
include = ["shellkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
