"""jsguide template rendering.

This module provides Jinja2-based template rendering with deterministic output.
Templates are designed to produce identical output for identical input.
"""

from jsguide.templates.renderer import DocumentRenderer, normalize_format

__all__ = ["DocumentRenderer", "normalize_format"]
