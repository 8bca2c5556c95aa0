"""Small tools: a sandpile simulator with BMP output, a binary search tree and tree container, a lazy task scheduler, and a text search index with a ranked finder."""

__version__ = "0.1.0"