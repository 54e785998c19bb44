"""Descriptor parsers: solution formats are auto-registered on import."""

from sln_overview.parsers import (
    sln,  # noqa: F401
    slnx,  # noqa: F401
)
from sln_overview.parsers.project import ProjectParser
from sln_overview.parsers.solution import SolutionParser

__all__ = ["ProjectParser", "SolutionParser"]
