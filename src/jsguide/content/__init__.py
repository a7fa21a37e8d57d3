"""Authored article content.

The article is constructed once when this package is imported and shared
for the lifetime of the process. Entities are frozen, so callers cannot
modify it.
"""

from jsguide.content.javascript_concepts import ARTICLE
from jsguide.models import Article


def get_article() -> Article:
    """Return the built-in JavaScript concepts article."""
    return ARTICLE


__all__ = ["ARTICLE", "get_article"]
