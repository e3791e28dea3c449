"""Classic algorithms and data structures: sorting, searching, heaps, trees,
hashing, string matching and long multiplication, in plain Python."""

__version__ = "0.1.0"