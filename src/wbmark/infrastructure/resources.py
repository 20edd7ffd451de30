"""Package resource access for bundled templates and styles.

Uses importlib.resources so the bundled files are found both when
running from source and from an installed package.
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path

__all__ = [
    "ResourceError",
    "get_component_templates_dir",
    "get_stylesheet",
    "get_templates_dir",
]


class ResourceError(Exception):
    """Raised when package resources cannot be accessed."""


def get_templates_dir() -> Path:
    """Get the bundled templates directory.

    Returns:
        Path to the wbmark/templates directory.

    Raises:
        ResourceError: If the templates directory cannot be accessed.
    """
    try:
        templates_path = Path(str(files("wbmark.templates")))
    except ModuleNotFoundError as e:
        raise ResourceError(
            "Cannot access package templates. Ensure wbmark is installed correctly."
        ) from e
    except TypeError as e:
        raise ResourceError(f"Cannot resolve templates path: {e}") from e

    if not templates_path.exists():
        raise ResourceError(
            f"Templates directory not found at package location: {templates_path}"
        )
    return templates_path


def get_component_templates_dir() -> Path:
    """Get the directory of per-component HTML templates.

    Raises:
        ResourceError: If the directory cannot be accessed or doesn't exist.
    """
    components_dir = get_templates_dir() / "components"
    if not components_dir.exists():
        raise ResourceError(f"Component templates directory not found: {components_dir}")
    return components_dir


def get_stylesheet() -> str:
    """Read the bundled preview stylesheet.

    Raises:
        ResourceError: If the stylesheet cannot be read.
    """
    path = get_templates_dir() / "styles.css"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceError(f"Cannot read stylesheet {path}: {e}") from e
