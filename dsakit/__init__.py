"""Classic data-structure and algorithm exercises as plain functions."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "arrays",
    "doubly",
    "list_algorithms",
    "pairs",
    "patterns",
    "recursion",
    "searching",
    "singly",
    "sorting",
    "strings",
]