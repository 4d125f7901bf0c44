"""Classic algorithms, data structures and two small terminal games."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "bst",
    "coin_change",
    "graphs",
    "linked_list",
    "matrix",
    "maze",
    "number_theory",
    "search",
    "snake",
    "sorting",
]