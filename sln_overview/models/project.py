"""Data model for a parsed project descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# JSON key -> attribute name, in output order
JSON_FIELDS: list[tuple[str, str]] = [
    ("Name", "name"),
    ("Path", "path"),
    ("Sdk", "sdk"),
    ("TargetFramework", "target_framework"),
    ("OutputType", "output_type"),
    ("Authors", "authors"),
    ("Version", "version"),
    ("SolutionFileName", "solution_file_name"),
]


@dataclass
class ProjectFile:
    """One .csproj file, optionally tied to the solution that references it."""

    name: str  # file name without extension
    path: str  # absolute until relativized for presentation
    sdk: str | None = None  # e.g. "Microsoft.NET.Sdk"; None for legacy projects
    target_framework: str | None = None  # "net8.0", "net6.0;net8.0", "v4.7.2"
    output_type: str | None = None
    authors: str | None = None
    version: str | None = None
    solution_file_name: str | None = None  # None = dangling

    @property
    def sdk_style(self) -> bool:
        return self.sdk is not None

    @property
    def is_dangling(self) -> bool:
        return self.solution_file_name is None

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, attr) for key, attr in JSON_FIELDS}
