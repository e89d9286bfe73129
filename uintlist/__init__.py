"""A singly linked list of unsigned 32-bit integers with forward cursors."""

__version__ = "0.1.0"
__all__ = ["linked_list"]