"""Blessed terminal viewer for virtualized lists."""

from .app import run_viewer

__all__ = ["run_viewer"]
