"""Syntax tree nodes, desugaring helpers, parameters and unique variable renaming for circuit programs."""

__version__ = "0.1.0"
__all__ = [
    "meta",
    "expressions",
    "statements",
    "shortcuts",
    "errors",
    "parameters",
    "unique_vars",
]