"""Disk helpers for the configuration template."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path


def write_text_file(path: Path, content: str) -> None:
    """Write ``content`` as UTF-8, creating parent directories first."""

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")


def ensure_file_with_template(path: Path, *, template_provider: Callable[[], str]) -> bool:
    """Create ``path`` from ``template_provider()`` unless it already exists.

    The file is opened in exclusive-create mode, so an existing configuration
    is never touched even if it appears between the check and the write.

    Returns:
        bool: ``True`` when the file was created.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(path, "x", encoding="utf-8") as handle:
            _ = handle.write(template_provider())
    except FileExistsError:
        return False
    return True


__all__ = ["ensure_file_with_template", "write_text_file"]
