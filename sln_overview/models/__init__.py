"""Data models for discovered projects and solutions."""

from sln_overview.models.project import ProjectFile
from sln_overview.models.solution import ScanResult, Solution

__all__ = ["ProjectFile", "ScanResult", "Solution"]
