"""Jinja2 filters used by the article templates."""
