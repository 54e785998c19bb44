"""sln-overview: inventory of .NET projects and the solutions that own them."""

__version__ = "0.1.0"

from sln_overview.exceptions import (
    DescriptorNotFoundError,
    InvalidArgumentError,
    MalformedDescriptorError,
    OverviewError,
    UnsupportedSolutionFormatError,
)
from sln_overview.models import ProjectFile, ScanResult, Solution
from sln_overview.overview import Overview, build_overview, collect_projects, relativize_paths
from sln_overview.parsers import ProjectParser, SolutionParser
from sln_overview.scanner import scan_tree

__all__ = [
    "DescriptorNotFoundError",
    "InvalidArgumentError",
    "MalformedDescriptorError",
    "Overview",
    "OverviewError",
    "ProjectFile",
    "ProjectParser",
    "ScanResult",
    "Solution",
    "SolutionParser",
    "UnsupportedSolutionFormatError",
    "build_overview",
    "collect_projects",
    "relativize_paths",
    "scan_tree",
]
