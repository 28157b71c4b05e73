"""Small utilities: membership checks, binary encoding, bit packing, lenient conversion and a keyed linked list."""

__version__ = "0.1.0"

__all__ = ["arr", "binary", "bits", "conv", "linkedlist"]