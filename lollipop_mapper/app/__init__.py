"""Dash front end for the lollipop diagram."""

from .app import create_app
from .figures import build_lollipop_figure

__all__ = ["create_app", "build_lollipop_figure"]
