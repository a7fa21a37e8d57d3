"""Unit tests for renderer filters."""

from markupsafe import Markup

from jsguide.models.inline import Code, Strong, Text, parse_inline
from jsguide.renderers.filters import (
    code_fence,
    inline_html,
    inline_markdown,
    markdown_cell,
    markdown_code_span,
)


class TestInlineHtml:
    """Tests for inline_html filter."""

    def test_returns_markup(self) -> None:
        """Test output is marked safe for the autoescaping environment."""
        assert isinstance(inline_html((Text("x"),)), Markup)

    def test_escapes_text(self) -> None:
        """Test plain text is escaped."""
        assert inline_html((Text("a < b & c"),)) == "a &lt; b &amp; c"

    def test_code_span(self) -> None:
        """Test code spans are wrapped and escaped."""
        result = inline_html((Code("x => x > 2"),))

        assert result == "<code>x =&gt; x &gt; 2</code>"

    def test_strong_with_code(self) -> None:
        """Test strong spans nest their children."""
        result = inline_html((Strong((Text("Use "), Code("let"))),))

        assert result == "<strong>Use <code>let</code></strong>"

    def test_parsed_sentence(self) -> None:
        """Test a full sentence from inline notation."""
        result = inline_html(parse_inline("Here, `inner()` remembers `count`."))

        assert result == "Here, <code>inner()</code> remembers <code>count</code>."


class TestInlineMarkdown:
    """Tests for inline_markdown filter."""

    def test_code_and_strong(self) -> None:
        """Test code and strong spans keep their Markdown notation."""
        result = inline_markdown(parse_inline("only the **declarations** use `var`"))

        assert result == "only the **declarations** use `var`"

    def test_escapes_special_text(self) -> None:
        """Test Markdown specials in plain text are escaped."""
        assert inline_markdown((Text("a_b * c"),)) == "a\\_b \\* c"

    def test_code_is_not_escaped(self) -> None:
        """Test code span content is literal."""
        assert inline_markdown((Code("x * 2"),)) == "`x * 2`"


class TestMarkdownCodeSpan:
    """Tests for markdown_code_span."""

    def test_plain(self) -> None:
        """Test code without backticks uses a single backtick."""
        assert markdown_code_span("let") == "`let`"

    def test_embedded_backticks(self) -> None:
        """Test code containing backticks uses a longer run."""
        assert markdown_code_span("a`b") == "``a`b``"

    def test_leading_backtick_padded(self) -> None:
        """Test code starting with a backtick is padded with spaces."""
        assert markdown_code_span("`${x}`") == "`` `${x}` ``"


class TestMarkdownCell:
    """Tests for markdown_cell filter."""

    def test_escapes_pipes(self) -> None:
        """Test column separators inside cells are escaped."""
        assert markdown_cell((Code("a || b"),)) == "`a \\|\\| b`"

    def test_plain_cell(self) -> None:
        """Test a plain cell is unchanged."""
        assert markdown_cell((Text("Transform array"),)) == "Transform array"


class TestCodeFence:
    """Tests for code_fence filter."""

    def test_default_fence(self) -> None:
        """Test a sample without backticks uses a triple fence."""
        result = code_fence("var x = 5;", "javascript")

        assert result == "```javascript\nvar x = 5;\n```"

    def test_fence_longer_than_content_run(self) -> None:
        """Test the fence outgrows backtick runs inside the code."""
        code = "const s = ```;"
        result = code_fence(code, "javascript")

        assert result.startswith("````javascript\n")
        assert result.endswith("\n````")

    def test_template_literal(self) -> None:
        """Test single backticks keep the triple fence."""
        result = code_fence("console.log(`Hello, ${this.name}!`);")

        assert result == "```\nconsole.log(`Hello, ${this.name}!`);\n```"
