"""jsguide data models.

This module exports all core entities used throughout the application:
- Article: The full static document
- Section: One titled block of content
- Paragraph, Heading, CodeBlock, ListBlock, Table, Callout: Block elements
- Text, Code, Strong: Inline spans
"""

from jsguide.models.article import (
    Article,
    Block,
    Callout,
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    Section,
    Table,
)
from jsguide.models.inline import Code, Span, Strong, Text, parse_inline, plain_text

__all__ = [
    "Article",
    "Section",
    "Block",
    "Paragraph",
    "Heading",
    "CodeBlock",
    "ListBlock",
    "Table",
    "Callout",
    "Span",
    "Text",
    "Code",
    "Strong",
    "parse_inline",
    "plain_text",
]
