"""ncbookmarks - a file-backed bookmark collection."""

__version__ = "0.1.0"
