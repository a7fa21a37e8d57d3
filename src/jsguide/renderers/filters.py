"""Jinja2 filters for turning article spans into markup.

HTML filters return markupsafe.Markup so the autoescaping environment does
not escape them twice. Markdown filters return plain strings.
"""

import re

from markupsafe import Markup, escape

from jsguide.models.inline import Code, Span, Strong, Text

# Characters with inline meaning in Markdown prose
_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_])")
_BACKTICK_RUN_RE = re.compile(r"`+")


def _longest_backtick_run(text: str) -> int:
    return max((len(run) for run in _BACKTICK_RUN_RE.findall(text)), default=0)


def inline_html(spans: tuple[Span, ...]) -> Markup:
    """Render inline spans to HTML.

    Args:
        spans: Spans to render

    Returns:
        Safe HTML markup

    Examples:
        >>> inline_html((Text("a < b "), Code("x => x")))
        Markup('a &lt; b <code>x =&gt; x</code>')
    """
    parts: list[Markup] = []

    for span in spans:
        if isinstance(span, Code):
            parts.append(Markup("<code>{}</code>").format(span.text))
        elif isinstance(span, Strong):
            parts.append(Markup("<strong>{}</strong>").format(inline_html(span.children)))
        else:
            parts.append(escape(span.text))

    return Markup("").join(parts)


def markdown_code_span(text: str) -> str:
    """Wrap text in a Markdown code span that survives embedded backticks."""
    ticks = "`" * (_longest_backtick_run(text) + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{ticks}{text}{ticks}"


def inline_markdown(spans: tuple[Span, ...]) -> str:
    """Render inline spans to Markdown."""
    parts: list[str] = []

    for span in spans:
        if isinstance(span, Code):
            parts.append(markdown_code_span(span.text))
        elif isinstance(span, Strong):
            parts.append(f"**{inline_markdown(span.children)}**")
        elif isinstance(span, Text):
            parts.append(_MARKDOWN_SPECIAL_RE.sub(r"\\\1", span.text))

    return "".join(parts)


def markdown_cell(spans: tuple[Span, ...]) -> str:
    """Render a table cell to Markdown, escaping column separators."""
    return inline_markdown(spans).replace("|", "\\|")


def code_fence(code: str, language: str = "") -> str:
    """Wrap a literal code sample in a fenced Markdown block.

    The fence is always longer than any backtick run inside the code, so
    template literals in the sample cannot close it early.
    """
    fence = "`" * max(3, _longest_backtick_run(code) + 1)
    return f"{fence}{language}\n{code}\n{fence}"
