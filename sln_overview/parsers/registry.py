"""Solution format registry: match solution files to format handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SolutionFormat(Protocol):
    """Interface that every solution format handler must satisfy."""

    format_name: str
    extensions: list[str]

    def read_project_paths(self, file_path: Path) -> list[str]:
        """Return member project paths exactly as written, relative to the solution."""
        ...


FORMAT_REGISTRY: dict[str, SolutionFormat] = {}


def register_format(handler: SolutionFormat) -> None:
    """Register a handler under each of its (lower-cased) extensions."""
    for ext in handler.extensions:
        FORMAT_REGISTRY[ext.lower()] = handler


def get_format(file_path: Path) -> SolutionFormat | None:
    """Pick the handler for *file_path* by extension, or None."""
    return FORMAT_REGISTRY.get(file_path.suffix.lower())
