"""Detect, format and print a short summary of the running Linux system."""

__version__ = "0.1.0"