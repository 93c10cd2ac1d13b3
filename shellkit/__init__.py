"""Building blocks for a small POSIX-style shell: environment, builtins and execution."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "conversions",
    "ctype",
    "environment",
    "execution",
    "fnvdict",
    "lineio",
]