"""Disk usage tree, folder listings and treemap tile layout with selection."""

__version__ = "0.11.0"