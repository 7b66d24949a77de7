"""Command-line interface for RepoMan."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
