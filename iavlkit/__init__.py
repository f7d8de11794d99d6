"""Building blocks for versioned AVL+ key/value trees: encodings, key formats, caching, traversal, export and rendering."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "encoding",
    "export",
    "fastnode",
    "hexbytes",
    "keyformat",
    "logger",
    "rand",
    "render",
    "stats",
    "traversal",
    "viewer",
]