"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from wbmark.infrastructure.config import RenderConfig

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for verbosity and loaded configuration.

    One instance is shared by every command. The app callback sets the
    verbose and quiet flags; the document and config commands read the
    RenderConfig through get_config(), which loads it on first use.
    """

    verbose: bool = False
    quiet: bool = False
    config: RenderConfig | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the singleton CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> RenderConfig:
        """Get render config, loading and caching on first access."""
        if self.config is None:
            from wbmark.infrastructure.config import load_config

            self.config = load_config()

        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance.

        Useful for testing to ensure clean state.
        """
        cls._instance = None
