"""Sorting, list editing, bit manipulation and multi-track float32 audio container helpers."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "cli", "sorting", "tracks"]