"""Classic algorithm exercises over numbers, arrays, strings, matrices, linked lists and trees."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "booking",
    "linkedlist",
    "matrices",
    "numbers",
    "patterns",
    "recursion",
    "sequences",
    "strings",
    "tree",
    "words",
]