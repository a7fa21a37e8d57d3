"""Template renderer for the article.

Renders an Article to HTML or Markdown using Jinja2 templates.
All output is deterministic - same input always produces same output.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from jsguide.config import JsguideConfig, PageConfig
from jsguide.models import Article
from jsguide.renderers.filters import code_fence, inline_html, inline_markdown, markdown_cell

logger = logging.getLogger(__name__)

# Output format -> template name
FORMAT_TEMPLATES: dict[str, str] = {
    "html": "article.html.j2",
    "markdown": "article.md.j2",
}

FORMAT_SUFFIXES: dict[str, str] = {
    "html": ".html",
    "markdown": ".md",
}

FORMAT_ALIASES: dict[str, str] = {
    "md": "markdown",
    "htm": "html",
}

PAGE_TEMPLATE = "page.html.j2"


def normalize_format(output_format: str) -> str:
    """Resolve a format name or alias to a supported format.

    Args:
        output_format: Format name (html, markdown, md)

    Returns:
        Canonical format name

    Raises:
        ValueError: If the format is not supported
    """
    name = output_format.strip().lower()
    name = FORMAT_ALIASES.get(name, name)
    if name not in FORMAT_TEMPLATES:
        raise ValueError(
            f"Unsupported output format: {output_format}. Valid: {sorted(FORMAT_TEMPLATES)}"
        )
    return name


class DocumentRenderer:
    """Renders an Article to HTML or Markdown.

    The renderer is stateless between calls: it holds only the Jinja2
    environment and configuration.

    Usage:
        renderer = DocumentRenderer(config)
        html = renderer.render(get_article())
    """

    def __init__(self, config: JsguideConfig | None = None) -> None:
        """Initialize the document renderer.

        Args:
            config: jsguide configuration
        """
        self.config = config or JsguideConfig()

        self._env = Environment(
            loader=PackageLoader("jsguide", "templates"),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["inline_html"] = inline_html
        self._env.filters["inline_markdown"] = inline_markdown
        self._env.filters["markdown_cell"] = markdown_cell
        self._env.filters["code_fence"] = code_fence

    def render(
        self,
        article: Article,
        output_format: str | None = None,
        standalone: bool | None = None,
    ) -> str:
        """Render an article.

        Args:
            article: Article to render
            output_format: html or markdown (defaults to config)
            standalone: Wrap HTML in a full page (defaults to config)

        Returns:
            Rendered document
        """
        fmt = normalize_format(output_format or self.config.output.format)
        if standalone is None:
            standalone = self.config.output.standalone

        template_name = FORMAT_TEMPLATES[fmt]
        if fmt == "html" and standalone:
            template_name = PAGE_TEMPLATE

        try:
            template = self._env.get_template(template_name)
        except TemplateError as e:
            logger.error("Failed to load template %s: %s", template_name, e)
            raise ValueError(f"Template not found: {template_name}") from e

        context = self._build_context(article, self.config.page)

        try:
            rendered = template.render(**context)
        except TemplateError as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.debug(
            "Rendered %d sections as %s (%d characters)",
            len(article.sections),
            fmt,
            len(rendered),
        )
        return rendered

    def _build_context(self, article: Article, page: PageConfig) -> dict[str, Any]:
        return {
            "article": article,
            "page": page,
        }

    def render_to_file(
        self,
        article: Article,
        output_path: Path,
        output_format: str | None = None,
        standalone: bool | None = None,
    ) -> Path:
        """Render an article and write it to a file.

        Args:
            article: Article to render
            output_path: Path to write output file
            output_format: html or markdown (defaults to config)
            standalone: Wrap HTML in a full page (defaults to config)

        Returns:
            Path to written file
        """
        content = self.render(article, output_format, standalone)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote article to %s", output_path)

        return output_path

    def preview(
        self,
        article: Article,
        output_format: str | None = None,
        standalone: bool | None = None,
        max_lines: int = 50,
    ) -> str:
        """Generate a preview of the rendered output.

        Args:
            article: Article to render
            output_format: html or markdown (defaults to config)
            standalone: Wrap HTML in a full page (defaults to config)
            max_lines: Maximum lines to include in preview

        Returns:
            Preview string with truncation indicator
        """
        full_content = self.render(article, output_format, standalone)
        lines = full_content.split("\n")

        if len(lines) <= max_lines:
            return full_content

        preview_lines = lines[:max_lines]
        preview_lines.append(f"\n... [{len(lines) - max_lines} more lines] ...")

        return "\n".join(preview_lines)

    def validate_template(self, template_path: Path) -> None:
        """Check a template file for Jinja2 syntax errors.

        Args:
            template_path: Template file to check

        Raises:
            jinja2.TemplateSyntaxError: If the template does not parse
        """
        source = template_path.read_text(encoding="utf-8")
        self._env.parse(source, name=template_path.name, filename=str(template_path))
