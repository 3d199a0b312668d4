"""A singly linked list with front, back and positional operations."""

__version__ = "0.1.0"
__all__ = ["singly"]