"""Highlight pattern matches in text and select one with a keyboard hint."""

__version__ = "0.5.7"