"""Locating and running the nim deployment tool."""

from .resolver import NIM_RELATIVE_PATH, get_nim_path
from .runner import NimRunner

__all__ = [
    "NIM_RELATIVE_PATH",
    "NimRunner",
    "get_nim_path",
]
