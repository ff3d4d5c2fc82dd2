"""Foldline: a read-only source viewer with structural folding."""

__version__ = "0.1.0"
