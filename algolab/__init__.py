"""Classic algorithms and data structures: sorting, scheduling, memory allocation, hashing, expressions, trees, lists, graphs and the Ulam spiral."""

__version__ = "0.1.0"