"""C library style character, memory, string, output and linked list helpers."""

__version__ = "1.0.0"

__all__ = ["ctype", "memory", "cstring", "output", "text", "linkedlist"]