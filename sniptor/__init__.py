"""Syntax trees, a symbol table and semantic checks for the Sniptor language."""

__version__ = "0.1.0"