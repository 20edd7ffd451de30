"""Global configuration persistence.

Handles reading and writing the global config.json with schema
versioning and atomic write operations.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import structlog

from wbmark.infrastructure.paths import PathResolver, default_resolver
from wbmark.modules.parser.tree import DEFAULT_MAX_DEPTH

__all__ = [
    "ConfigError",
    "RenderConfig",
    "load_config",
    "save_config",
]

logger = structlog.get_logger()

# Current schema version - increment when making breaking changes
# v1: Initial schema
SCHEMA_VERSION = "1"

# Maximum config file size (1MB)
MAX_CONFIG_SIZE = 1 * 1024 * 1024


class ConfigError(Exception):
    """Raised when configuration operations fail."""


@dataclass(frozen=True)
class RenderConfig:
    """Immutable rendering configuration.

    Attributes:
        max_depth: Maximum block nesting the parser accepts.
        max_include_depth: Maximum chain of nested ``include`` components.
        content_dir: Content directory, relative to the project root.
        media_dir: Shared media directory, relative to the project root.
        linkify: Turn bare URLs in text into links.
        date_locale: Locale for the ``format_date`` template filter.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_include_depth: int = 8
    content_dir: str = "content"
    media_dir: str = "public/img"
    linkify: bool = True
    date_locale: str = "ru"


def save_config(config: RenderConfig, resolver: PathResolver | None = None) -> None:
    """Save configuration to a JSON file.

    Uses atomic write (temp file + rename) to prevent corruption.

    Args:
        config: Configuration to save.
        resolver: Path resolver (defaults to default_resolver).

    Raises:
        ConfigError: If saving fails.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()
    data = _config_to_dict(config)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            json.dump(data, tmp, indent=2)
            tmp_path = Path(tmp.name)

        tmp_path.replace(path)

        logger.debug("config_saved", path=str(path))

    except OSError as e:
        if "tmp_path" in locals():
            tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Failed to save config: {e}") from e


def load_config(resolver: PathResolver | None = None) -> RenderConfig:
    """Load configuration from a JSON file.

    Missing, oversized or invalid files fall back to the defaults.

    Args:
        resolver: Path resolver (defaults to default_resolver).

    Returns:
        RenderConfig instance.
    """
    if resolver is None:
        resolver = default_resolver

    path = resolver.global_config()

    if not path.exists():
        logger.debug("config_not_found", path=str(path))
        return RenderConfig()

    try:
        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            logger.warning(
                "config_too_large",
                path=str(path),
                size=file_size,
                max_size=MAX_CONFIG_SIZE,
            )
            return RenderConfig()

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        version = data.get("version")
        if version and version != SCHEMA_VERSION:
            logger.warning(
                "config_version_mismatch",
                path=str(path),
                expected=SCHEMA_VERSION,
                found=version,
            )

        return _dict_to_config(data)

    except json.JSONDecodeError as e:
        logger.warning("config_invalid_json", path=str(path), error=str(e))
        return RenderConfig()
    except (TypeError, ValueError) as e:
        logger.warning("config_parse_error", path=str(path), error=str(e))
        return RenderConfig()
    except OSError as e:
        logger.warning("config_read_error", path=str(path), error=str(e))
        return RenderConfig()


def _config_to_dict(config: RenderConfig) -> dict[str, Any]:
    data = asdict(config)
    data["version"] = SCHEMA_VERSION
    return data


def _dict_to_config(data: dict[str, Any]) -> RenderConfig:
    """Convert dict to RenderConfig.

    Unknown keys are ignored; known keys must match the default's type.

    Raises:
        TypeError: If a field has an invalid type.
        ValueError: If a depth limit is not positive.
    """
    defaults = RenderConfig()
    values: dict[str, Any] = {}

    for f in fields(RenderConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        expected = type(getattr(defaults, f.name))
        # bool is an int subclass; reject it for numeric fields
        if not isinstance(value, expected) or (
            expected is int and isinstance(value, bool)
        ):
            raise TypeError(f"{f.name} must be {expected.__name__}")
        values[f.name] = value

    config = RenderConfig(**values)
    if config.max_depth < 1 or config.max_include_depth < 0:
        raise ValueError("depth limits must be positive")
    return config
