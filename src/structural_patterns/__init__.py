"""Structural patterns catalog: part-whole graphics and shared tree types."""

__version__ = "1.0.0"
