"""Shared pytest fixtures for jsguide tests.

This module provides common fixtures used across unit and integration
tests. Fixtures are organized by category:
- Article fixtures: The built-in article and small hand-built articles
- Configuration fixtures: Test configs for various scenarios
- Renderer fixtures: Ready-to-use renderers
"""

from typing import Any

import pytest

from jsguide.config import JsguideConfig
from jsguide.content import get_article
from jsguide.models import (
    Article,
    Callout,
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    Section,
    Table,
)
from jsguide.templates import DocumentRenderer

# =============================================================================
# Article Fixtures
# =============================================================================


@pytest.fixture
def article() -> Article:
    """Return the built-in JavaScript concepts article."""
    return get_article()


@pytest.fixture
def small_article() -> Article:
    """Return a compact article touching every block type."""
    return Article(
        title="Tiny Guide",
        intro=(Paragraph.from_text("Read **carefully** and use `const`."),),
        sections=(
            Section(
                title="First",
                blocks=(
                    Heading("Sample"),
                    CodeBlock('if (a < b && c > d) { el.innerHTML = "<em>x</em>"; }'),
                    ListBlock.from_items("one", "two `2`", ordered=True),
                ),
            ),
            Section(
                title="Second",
                blocks=(
                    Table.from_text(
                        header=["Operator", "Meaning"],
                        rows=[["`a || b`", "logical or"], ["`a && b`", "logical and"]],
                    ),
                    Callout("tip", (ListBlock.from_items("✅ stay strict"),)),
                ),
                divider=False,
            ),
            Section(
                title="Wrap-up",
                css_class="conclusion",
                blocks=(Paragraph.from_text("Done."),),
                divider=False,
            ),
        ),
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid jsguide configuration."""
    return {
        "output": {
            "path": "build/guide.html",
            "format": "html",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete jsguide configuration with all options."""
    return {
        "output": {
            "path": "site/guide.md",
            "format": "markdown",
            "standalone": True,
        },
        "page": {
            "lang": "de",
            "stylesheet": "css/guide.css",
        },
    }


# =============================================================================
# Renderer Fixtures
# =============================================================================


@pytest.fixture
def renderer() -> DocumentRenderer:
    """Create a renderer with default configuration."""
    return DocumentRenderer()


@pytest.fixture
def markdown_renderer() -> DocumentRenderer:
    """Create a renderer that defaults to Markdown output."""
    config = JsguideConfig()
    config.output.format = "markdown"
    return DocumentRenderer(config)
