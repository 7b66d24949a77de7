"""Shared file I/O helpers."""

from .json_io import dump_json, load_json_file

__all__ = ["dump_json", "load_json_file"]
