"""Command-line interface for vaultmeta."""

from .main import create_parser, main

__all__ = ["create_parser", "main"]
