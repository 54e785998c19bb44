"""Solution parser: resolve a solution's member projects to absolute paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Ensure formats are registered before any solution is parsed.
import sln_overview.parsers.sln  # noqa: F401
import sln_overview.parsers.slnx  # noqa: F401
from sln_overview.exceptions import (
    DescriptorNotFoundError,
    InvalidArgumentError,
    UnsupportedSolutionFormatError,
)
from sln_overview.models.solution import Solution
from sln_overview.parsers.registry import get_format
from sln_overview.scanner import is_project_file

logger = logging.getLogger(__name__)


def resolve_member_path(solution_dir: str, relative_path: str) -> str:
    """Join a solution-relative member path onto *solution_dir* and normalise it.

    Solution files written on Windows use backslashes; both separators are
    accepted regardless of host.
    """
    normalized = relative_path.replace("\\", "/")
    return os.path.normpath(os.path.join(solution_dir, normalized))


class SolutionParser:
    """Parse .sln / .slnx files into :class:`Solution` records."""

    def parse(self, file_path: str | os.PathLike) -> Solution:
        if not file_path or not os.fspath(file_path):
            raise InvalidArgumentError("solution file path must not be empty")

        path = os.path.abspath(file_path)
        if not os.path.isfile(path):
            raise DescriptorNotFoundError("Solution", path)

        handler = get_format(Path(path))
        if handler is None:
            raise UnsupportedSolutionFormatError(path)

        solution_dir = os.path.dirname(path)
        raw_paths = handler.read_project_paths(Path(path))

        project_paths = sorted(
            resolved
            for resolved in (resolve_member_path(solution_dir, p) for p in raw_paths)
            if is_project_file(resolved)
        )

        logger.debug(
            "Parsed %s solution %s: %d entries, %d project(s)",
            handler.format_name,
            path,
            len(raw_paths),
            len(project_paths),
        )
        return Solution(name=os.path.basename(path), path=path, project_paths=project_paths)
