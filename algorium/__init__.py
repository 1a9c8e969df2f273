"""Classic algorithms: sorting, searching, an AVL tree, graphs, puzzles and small helpers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "graphs",
    "numeric",
    "patterns",
    "problems",
    "searching",
    "sorting",
    "text",
]