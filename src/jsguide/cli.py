"""jsguide CLI interface.

Commands:
- render: Render the article to HTML or Markdown
- outline: List the article's sections
- init: Initialize jsguide configuration
- validate: Validate a Jinja2 template

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from jinja2 import TemplateSyntaxError

from jsguide import __version__
from jsguide.config import JsguideConfig, create_default_config, load_config
from jsguide.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="jsguide",
    help="Render the Advanced JavaScript Concepts guide",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: JsguideConfig | None = None
_logger = get_logger()

CONFIG_FILENAME = "jsguide.yaml"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"jsguide {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """jsguide - Advanced JavaScript Concepts for Developers.

    Render the guide as an HTML fragment, a standalone page, or Markdown.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (ValueError, OSError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (overrides config)",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: html, markdown",
        ),
    ] = None,
    standalone: Annotated[
        bool,
        typer.Option(
            "--standalone",
            help="Wrap HTML in a complete page (default from config)",
        ),
    ] = False,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the document instead of writing a file",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Preview output without writing files",
        ),
    ] = False,
) -> None:
    """Render the article.

    Exit codes:
        0: Article rendered successfully
        1: Error during rendering
    """
    from jsguide.content import get_article
    from jsguide.templates import DocumentRenderer, normalize_format
    from jsguide.templates.renderer import FORMAT_SUFFIXES

    config = _config or JsguideConfig()

    try:
        output_format = normalize_format(format or config.output.format)
    except ValueError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    if output is not None:
        output_path = output
    else:
        output_path = Path(config.output.path)
        if output_format != normalize_format(config.output.format):
            output_path = output_path.with_suffix(FORMAT_SUFFIXES[output_format])

    article = get_article()
    renderer = DocumentRenderer(config)
    page = True if standalone else None

    try:
        if stdout:
            typer.echo(renderer.render(article, output_format, page), nl=False)
        elif dry_run:
            _logger.info(f"Dry run: would write {output_path} (format: {output_format})")
            preview = renderer.preview(article, output_format, page)
            typer.echo("\n--- Article Preview ---\n")
            typer.echo(preview)
            typer.echo("\n--- End Preview ---")
        else:
            written = renderer.render_to_file(article, output_path, output_format, page)
            typer.echo(f"\n📄 Article written to: {written}")
    except (ValueError, OSError) as e:
        _logger.error(f"Rendering failed: {e}")
        raise typer.Exit(1)

    _logger.structured(
        logging.INFO,
        "Rendered article",
        format=output_format,
        sections=len(article.sections),
        code_blocks=sum(1 for _ in article.code_blocks()),
        tables=sum(1 for _ in article.tables()),
    )


# =============================================================================
# outline command
# =============================================================================


@app.command()
def outline(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the outline as JSON",
        ),
    ] = False,
) -> None:
    """List the article's sections in document order."""
    from jsguide.content import get_article

    article = get_article()
    entries = article.to_outline()

    if json_output:
        typer.echo(
            json.dumps(
                {"title": article.title, "sections": entries},
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    typer.echo(f"\n{article.title}\n")
    for entry in entries:
        details = f"{entry['code_blocks']} code"
        if entry["has_table"]:
            details += ", table"
        typer.echo(f"  {entry['index']:>2}  {entry['title']}  ({details})")

    code_blocks = sum(1 for _ in article.code_blocks())
    tables = sum(1 for _ in article.tables())
    typer.echo(f"\n{len(entries)} sections, {code_blocks} code blocks, {tables} tables")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    directory: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Directory to write the configuration file into",
            file_okay=False,
        ),
    ] = Path("."),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing configuration file",
        ),
    ] = False,
) -> None:
    """Write a default jsguide.yaml configuration."""
    config_file = directory / CONFIG_FILENAME

    if config_file.exists() and not force:
        _logger.error(f"Configuration already exists: {config_file} (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        directory.mkdir(parents=True, exist_ok=True)
        config_file.write_text(create_default_config(), encoding="utf-8")
    except OSError as e:
        _logger.error(f"Failed to write configuration: {e}")
        raise typer.Exit(1)

    typer.echo("\n✅ jsguide configuration initialized")
    typer.echo(f"   Config: {config_file}")


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    template: Annotated[
        Path,
        typer.Argument(
            help="Path to Jinja2 template to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a Jinja2 template's syntax."""
    from jsguide.templates import DocumentRenderer

    renderer = DocumentRenderer(_config)

    try:
        renderer.validate_template(template)
    except TemplateSyntaxError as e:
        typer.echo(f"❌ Template syntax error at line {e.lineno}: {e.message}")
        raise typer.Exit(1)

    typer.echo(f"✅ Template is valid: {template}")
