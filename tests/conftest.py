"""Shared test fixtures for wbmark tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from wbmark.cli.context import CLIContext
from wbmark.infrastructure.config import RenderConfig

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def cli_context() -> Generator[CLIContext]:
    """Fresh CLI context with default config (never reads ~/.wbmark)."""
    CLIContext.reset()
    ctx = CLIContext.get()
    ctx.config = RenderConfig()
    yield ctx
    CLIContext.reset()


@pytest.fixture(autouse=True)
def _keep_logging_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI invocations must not bind structlog to the runner's streams."""
    monkeypatch.setattr("wbmark.cli.app.configure_logging", lambda **_: None)


@pytest.fixture
def project_root(temp_dir: Path) -> Path:
    """Create a content project with includes, media and a document.

    Layout:
        content/en/page.md
        content/en/shared/footer.md
        content/ru/shared/footer.md
        public/img/logo.png
        content/en/cat.png
    """
    root = temp_dir / "site"
    en = root / "content" / "en"
    ru = root / "content" / "ru"
    (en / "shared").mkdir(parents=True)
    (ru / "shared").mkdir(parents=True)
    (root / "public" / "img").mkdir(parents=True)

    (en / "page.md").write_text("# Page\n", encoding="utf-8")
    (en / "shared" / "footer.md").write_text("Footer *text*\n", encoding="utf-8")
    (ru / "shared" / "footer.md").write_text("Подвал\n", encoding="utf-8")
    (root / "public" / "img" / "logo.png").write_bytes(b"\x89PNG")
    (en / "cat.png").write_bytes(b"\x89PNG")

    return root
