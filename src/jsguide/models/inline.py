"""Inline text spans and the authoring notation that produces them.

Prose in the article is authored as plain strings with two delimiters:
- `code` for inline code (content is literal)
- **strong** for bold text (may contain inline code)

parse_inline() turns such a string into a tuple of spans.
"""

from dataclasses import dataclass

CODE_DELIMITER = "`"
STRONG_DELIMITER = "**"


@dataclass(frozen=True)
class Text:
    """Plain text run."""

    text: str

    kind = "text"


@dataclass(frozen=True)
class Code:
    """Inline code run, rendered in a monospace element."""

    text: str

    kind = "code"


@dataclass(frozen=True)
class Strong:
    """Bold run. Children are Text or Code spans."""

    children: tuple["Text | Code", ...]

    kind = "strong"

    @property
    def text(self) -> str:
        return plain_text(self.children)


Span = Text | Code | Strong


def _append_text(spans: list[Span], text: str) -> None:
    if not text:
        return
    if spans and isinstance(spans[-1], Text):
        spans[-1] = Text(spans[-1].text + text)
    else:
        spans.append(Text(text))


def _parse_code_spans(text: str) -> list[Span]:
    spans: list[Span] = []
    pos = 0

    while pos < len(text):
        start = text.find(CODE_DELIMITER, pos)
        if start == -1:
            break
        end = text.find(CODE_DELIMITER, start + 1)
        if end == -1:
            break
        _append_text(spans, text[pos:start])
        spans.append(Code(text[start + 1 : end]))
        pos = end + 1

    _append_text(spans, text[pos:])
    return spans


def _find_strong_close(text: str, start: int) -> int:
    pos = start
    while pos < len(text):
        if text.startswith(CODE_DELIMITER, pos):
            end = text.find(CODE_DELIMITER, pos + 1)
            pos = pos + 1 if end == -1 else end + 1
            continue
        if text.startswith(STRONG_DELIMITER, pos):
            return pos
        pos += 1
    return -1


def parse_inline(text: str) -> tuple[Span, ...]:
    """Parse authoring notation into inline spans.

    Code spans take precedence: `**` inside backticks stays literal.
    An unterminated delimiter is kept as literal text.

    Args:
        text: Authored inline text

    Returns:
        Tuple of spans in reading order

    Examples:
        >>> parse_inline("Use `let` **today**")
        (Text(text='Use '), Code(text='let'), Text(text=' '), Strong(children=(Text(text='today'),)))
    """
    spans: list[Span] = []
    pos = 0
    buffer_start = 0

    while pos < len(text):
        if text.startswith(CODE_DELIMITER, pos):
            end = text.find(CODE_DELIMITER, pos + 1)
            if end == -1:
                pos += 1
                continue
            pos = end + 1
            continue

        if text.startswith(STRONG_DELIMITER, pos):
            end = _find_strong_close(text, pos + len(STRONG_DELIMITER))
            if end == -1:
                pos += len(STRONG_DELIMITER)
                continue
            for span in _parse_code_spans(text[buffer_start:pos]):
                if isinstance(span, Text):
                    _append_text(spans, span.text)
                else:
                    spans.append(span)
            inner = text[pos + len(STRONG_DELIMITER) : end]
            children = tuple(_parse_code_spans(inner))
            if children:
                spans.append(Strong(children))  # type: ignore[arg-type]
            pos = end + len(STRONG_DELIMITER)
            buffer_start = pos
            continue

        pos += 1

    for span in _parse_code_spans(text[buffer_start:]):
        if isinstance(span, Text):
            _append_text(spans, span.text)
        else:
            spans.append(span)

    return tuple(spans)


def plain_text(spans: tuple[Span, ...]) -> str:
    """Flatten spans to unformatted text."""
    return "".join(span.text for span in spans)
