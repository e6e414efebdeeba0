"""Helpers for ASCII characters, byte buffers, C-style strings, fd output and linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "transform", "output", "linkedlist"]