"""Blessed UI helper functions."""

from .terminal import write_at, write_block
from . import scrolling

__all__ = ["write_at", "write_block", "scrolling"]
