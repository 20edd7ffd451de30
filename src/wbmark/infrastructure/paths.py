"""Path resolution for wbmark configuration and project content."""

from __future__ import annotations

import re
from pathlib import Path

__all__ = [
    "PathResolver",
    "ProjectLayout",
    "default_resolver",
]

_IMG_PREFIX_RE = re.compile(r"^/?img/")
_EXTERNAL_URL_RE = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9+.-]*:)?//|^data:")


class PathResolver:
    """Resolves paths for wbmark's own storage.

    Storage layout:
        ~/.wbmark/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to ~/.wbmark.
        """
        self.base = base or Path.home() / ".wbmark"

    def ensure_base(self) -> Path:
        """Ensure base directory exists and return it."""
        self.base.mkdir(parents=True, exist_ok=True)
        return self.base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"


class ProjectLayout:
    """Resolves paths inside a content project.

    Project layout:
        <root>/
        ├── content/
        │   ├── en/         includes for English documents
        │   └── ru/         includes for Russian documents
        └── public/
            └── img/        media referenced as /img/...
    """

    def __init__(
        self,
        root: Path,
        *,
        content_dir: str = "content",
        media_dir: str = "public/img",
    ) -> None:
        """Initialize project layout.

        Args:
            root: Project root directory.
            content_dir: Content directory relative to the root.
            media_dir: Shared media directory relative to the root.
        """
        self.root = root
        self.content_dir = root / content_dir
        self.media_dir = root.joinpath(*media_dir.split("/"))

    @staticmethod
    def language_of(document_path: Path) -> str:
        """Content language of a document, judged by its directory names."""
        return "ru" if "ru" in document_path.parts else "en"

    def include_file(self, include_path: str, document_path: Path) -> Path:
        """Markdown file an ``include`` component refers to.

        Args:
            include_path: Value of the component's ``path`` attribute,
                relative to the language directory, without extension.
            document_path: Document that contains the include.

        Raises:
            ValueError: If the include path has no components.
        """
        parts = [p for p in include_path.replace("\\", "/").split("/") if p]
        if not parts:
            raise ValueError(f"Invalid include path: {include_path!r}")

        language_dir = self.content_dir / self.language_of(document_path)
        return language_dir.joinpath(*parts[:-1], f"{parts[-1]}.md")

    def media_file(self, src: str, document_path: Path) -> Path:
        """Filesystem path of a media reference.

        ``img/...`` and ``/img/...`` point into the shared media
        directory; anything else is relative to the document.
        """
        normalized = src.replace("\\", "/")
        if _IMG_PREFIX_RE.match(normalized):
            asset = _IMG_PREFIX_RE.sub("", normalized, count=1)
            return self.media_dir.joinpath(*[p for p in asset.split("/") if p])

        return document_path.parent.joinpath(
            *[p for p in normalized.split("/") if p]
        )

    def solutions_dir(self, document_path: Path) -> Path:
        """Directory holding solution pages referenced by ``use_cases``."""
        return document_path.parent.parent / "solutions"

    @staticmethod
    def is_external(src: str) -> bool:
        """Whether a media reference is a URL rather than a file path."""
        return bool(_EXTERNAL_URL_RE.match(src))


# Default resolver instance
default_resolver = PathResolver()
