"""A document-checking desk game played with text commands."""

__version__ = "0.1.0"