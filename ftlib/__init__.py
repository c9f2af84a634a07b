"""C-style character, number, string, memory, linked list, formatted output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "cstrings", "memory", "linkedlist", "printfd", "linereader"]