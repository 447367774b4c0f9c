"""Declaration generation services."""

from .declaration_renderer import render_declaration

__all__ = ["render_declaration"]
