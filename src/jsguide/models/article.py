"""Article entities.

This module contains the immutable content model:
- Paragraph, Heading, CodeBlock, ListBlock, Table, Callout: block elements
- Section: one titled block of content
- Article: the ordered sequence of sections

Every entity is a frozen dataclass holding tuples, so an Article cannot be
changed after it is authored. Structural invariants are checked in
__post_init__ and violations raise ValueError.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from jsguide.models.inline import Span, parse_inline, plain_text

Cell = tuple[Span, ...]


@dataclass(frozen=True)
class Paragraph:
    """Prose paragraph.

    Attributes:
        spans: Inline spans making up the paragraph
    """

    spans: tuple[Span, ...]

    kind = "paragraph"

    @classmethod
    def from_text(cls, text: str) -> "Paragraph":
        """Create a paragraph from inline authoring notation."""
        return cls(parse_inline(text))

    @property
    def text(self) -> str:
        return plain_text(self.spans)


@dataclass(frozen=True)
class Heading:
    """Sub-heading inside a section.

    Section titles are level 2, so sub-headings start at level 3.

    Attributes:
        text: Heading text
        level: Heading level (3-6)
    """

    text: str
    level: int = 3

    kind = "heading"

    def __post_init__(self) -> None:
        """Validate heading level."""
        if not 3 <= self.level <= 6:
            raise ValueError(f"Sub-heading level must be between 3 and 6 (got {self.level})")


@dataclass(frozen=True)
class CodeBlock:
    """Literal code sample.

    The code is stored exactly as it should be displayed. Renderers are
    responsible for escaping it for their output format.

    Attributes:
        code: Literal source text
        language: Language of the sample (used for Markdown fences)
    """

    code: str
    language: str = "javascript"

    kind = "code_block"


@dataclass(frozen=True)
class ListBlock:
    """Ordered or unordered list.

    Attributes:
        items: List items, each a tuple of inline spans
        ordered: Whether the list is numbered
    """

    items: tuple[tuple[Span, ...], ...]
    ordered: bool = False

    kind = "list"

    @classmethod
    def from_items(cls, *items: str, ordered: bool = False) -> "ListBlock":
        """Create a list from inline authoring notation, one string per item."""
        return cls(tuple(parse_inline(item) for item in items), ordered=ordered)


@dataclass(frozen=True)
class Table:
    """Table with a header row and body rows.

    Attributes:
        header: Header cells
        rows: Body rows, each with exactly len(header) cells
    """

    header: tuple[Cell, ...]
    rows: tuple[tuple[Cell, ...], ...]

    kind = "table"

    def __post_init__(self) -> None:
        """Validate that every row matches the header width."""
        if not self.header:
            raise ValueError("Table header must have at least one column")
        for index, row in enumerate(self.rows):
            if len(row) != len(self.header):
                raise ValueError(
                    f"Table row {index} has {len(row)} cells, expected {len(self.header)}"
                )

    @classmethod
    def from_text(cls, header: list[str], rows: list[list[str]]) -> "Table":
        """Create a table from inline authoring notation."""
        return cls(
            header=tuple(parse_inline(cell) for cell in header),
            rows=tuple(tuple(parse_inline(cell) for cell in row) for row in rows),
        )

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class Callout:
    """Styled container block (e.g. a tips box).

    Attributes:
        css_class: Class name of the container
        blocks: Blocks inside the container
    """

    css_class: str
    blocks: tuple["Block", ...]

    kind = "callout"


Block = Paragraph | Heading | CodeBlock | ListBlock | Table | Callout


def _walk(blocks: tuple[Block, ...]) -> Iterator[Block]:
    for block in blocks:
        yield block
        if isinstance(block, Callout):
            yield from _walk(block.blocks)


@dataclass(frozen=True)
class Section:
    """One titled block of content within the article.

    Attributes:
        title: Section heading (rendered at level 2)
        blocks: Section body in document order
        css_class: Optional class of a container wrapping the whole section
        divider: Whether a horizontal rule follows the section
    """

    title: str
    blocks: tuple[Block, ...] = field(default_factory=tuple)
    css_class: str | None = None
    divider: bool = True

    def __post_init__(self) -> None:
        """Validate section structure."""
        if not self.title.strip():
            raise ValueError("Section title must not be empty")

        tables = [block for block in _walk(self.blocks) if isinstance(block, Table)]
        if len(tables) > 1:
            raise ValueError(
                f"Section {self.title!r} has {len(tables)} tables, at most one is allowed"
            )

    def walk(self) -> Iterator[Block]:
        """Iterate all blocks depth-first, including those inside callouts."""
        return _walk(self.blocks)

    @property
    def table(self) -> Table | None:
        """The section's table, if it has one."""
        for block in self.walk():
            if isinstance(block, Table):
                return block
        return None

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return [block for block in self.walk() if isinstance(block, CodeBlock)]


@dataclass(frozen=True)
class Article:
    """The full static document.

    Attributes:
        title: Article title (the only level 1 heading)
        intro: Blocks before the first section
        sections: Sections in document order
        intro_divider: Whether a horizontal rule follows the intro
    """

    title: str
    intro: tuple[Block, ...] = field(default_factory=tuple)
    sections: tuple[Section, ...] = field(default_factory=tuple)
    intro_divider: bool = True

    def __post_init__(self) -> None:
        """Validate article structure."""
        if not self.title.strip():
            raise ValueError("Article title must not be empty")

    def section(self, title: str) -> Section:
        """Look up a section by its exact title.

        Raises:
            KeyError: If no section has that title
        """
        for section in self.sections:
            if section.title == title:
                return section
        raise KeyError(title)

    def tables(self) -> Iterator[Table]:
        """Iterate every table in document order."""
        for block in _walk(self.intro):
            if isinstance(block, Table):
                yield block
        for section in self.sections:
            if section.table is not None:
                yield section.table

    def code_blocks(self) -> Iterator[CodeBlock]:
        """Iterate every code block in document order."""
        for block in _walk(self.intro):
            if isinstance(block, CodeBlock):
                yield block
        for section in self.sections:
            yield from section.code_blocks

    def to_outline(self) -> list[dict[str, object]]:
        """Summarize sections for display."""
        return [
            {
                "index": index,
                "title": section.title,
                "code_blocks": len(section.code_blocks),
                "has_table": section.table is not None,
            }
            for index, section in enumerate(self.sections, start=1)
        ]
