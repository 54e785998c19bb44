"""Data models for solution files and tree scan results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Solution:
    """A parsed .sln or .slnx file."""

    name: str  # file name including extension
    path: str  # absolute path to the solution file
    project_paths: list[str] = field(default_factory=list)  # absolute, sorted, .csproj only


@dataclass
class ScanResult:
    """Descriptor files found under a search root."""

    project_files: list[str] = field(default_factory=list)  # unsorted
    solution_files: list[str] = field(default_factory=list)  # sorted by full path
