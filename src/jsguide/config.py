"""jsguide configuration system.

Configuration is YAML-based with minimal CLI overrides (--output, --format, --standalone).
Supports environment variable substitution (${VAR}, ${VAR:-fallback}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.jsguide/config.yaml
3. ./jsguide.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

VALID_FORMATS = {"html", "htm", "markdown", "md"}

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Output file path
        format: Output format (html, markdown)
        standalone: Wrap HTML output in a complete page
    """

    path: str = "build/javascript-concepts.html"
    format: str = "html"
    standalone: bool = False

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.format.lower() not in VALID_FORMATS:
            raise ValueError(f"Invalid output format: {self.format}. Valid: {VALID_FORMATS}")


@dataclass
class PageConfig:
    """Settings for standalone HTML pages.

    Attributes:
        lang: Value of the html lang attribute
        stylesheet: Optional stylesheet href replacing the built-in styles
    """

    lang: str = "en"
    stylesheet: str | None = None


@dataclass
class JsguideConfig:
    """Top-level jsguide configuration.

    Attributes:
        output: Output path and format
        page: Standalone page settings
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    page: PageConfig = field(default_factory=PageConfig)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

# ${VAR} or ${VAR:-fallback}
_ENV_VAR_RE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")


def _expand_env_var(match: re.Match[str]) -> str:
    name = match.group("name")
    value = os.environ.get(name)
    if value is not None:
        return value
    if match.group("default") is not None:
        return match.group("default")
    raise ValueError(f"Environment variable not set: {name}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} and ${VAR:-fallback}, e.g. ${GUIDE_DIR:-build}/guide.html.
    Strings nested in mappings and lists are expanded too.

    Raises:
        ValueError: If a variable without fallback is not set
    """
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(_expand_env_var, value)
    if isinstance(value, dict):
        return {key: substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    return value


# =============================================================================
# Config File Discovery
# =============================================================================

# Relative to the start directory, highest priority first
CONFIG_CANDIDATES = (
    Path(".jsguide") / "config.yaml",
    Path("jsguide.yaml"),
)


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Return the first of CONFIG_CANDIDATES under start_path (default: cwd)."""
    base = (start_path or Path.cwd()).resolve()
    return next(
        (base / candidate for candidate in CONFIG_CANDIDATES if (base / candidate).is_file()),
        None,
    )


# =============================================================================
# Config Loading
# =============================================================================


def _section(data: dict[str, Any], name: str) -> dict[str, Any] | None:
    if name not in data:
        return None
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def load_config_from_dict(data: Any) -> JsguideConfig:
    """Load configuration from a dictionary.

    Args:
        data: Parsed YAML document

    Returns:
        JsguideConfig instance

    Raises:
        ValueError: If the document or one of its sections is not a mapping,
            or a value fails validation
    """
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping")
    data = substitute_env_vars(data)

    config = JsguideConfig()

    output_data = _section(data, "output")
    if output_data is not None:
        config.output = OutputConfig(
            path=output_data.get("path", config.output.path),
            format=output_data.get("format", config.output.format),
            standalone=output_data.get("standalone", config.output.standalone),
        )

    page_data = _section(data, "page")
    if page_data is not None:
        config.page = PageConfig(
            lang=page_data.get("lang", config.page.lang),
            stylesheet=page_data.get("stylesheet"),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> JsguideConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        JsguideConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
        ValueError: If the file is not valid YAML or fails validation
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {found_path}: {e}") from e
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = JsguideConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# jsguide Configuration

# Output settings
output:
  path: "build/javascript-concepts.html"
  format: "html"        # html, markdown
  standalone: false     # wrap HTML in a complete page

# Standalone page settings
page:
  lang: "en"
  # stylesheet: "styles/guide.css"  # replaces the built-in styles
'''
