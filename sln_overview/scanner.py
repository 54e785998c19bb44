"""Tree walker: find project and solution files under a search root."""

from __future__ import annotations

import logging
import os

from sln_overview.models.solution import ScanResult

logger = logging.getLogger(__name__)

PROJECT_EXTENSION = ".csproj"
SOLUTION_EXTENSIONS: tuple[str, ...] = (".sln", ".slnx")

# Directory names never descended into (compared case-insensitively)
_SKIP_DIRS = {".git", "bin", "obj"}


def is_project_file(name: str) -> bool:
    return name.lower().endswith(PROJECT_EXTENSION)


def is_solution_file(name: str) -> bool:
    return name.lower().endswith(SOLUTION_EXTENSIONS)


def scan_tree(root: str | os.PathLike) -> ScanResult:
    """Collect .csproj, .sln and .slnx files below *root*.

    The caller is responsible for checking that *root* exists. Directories
    that cannot be listed are skipped silently.

    Returns:
        ScanResult with absolute project paths in walk order and absolute
        solution paths sorted by full path.
    """
    root_path = os.path.abspath(root)
    project_files: list[str] = []
    solution_files: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = [d for d in dirnames if d.lower() not in _SKIP_DIRS]
        for f in filenames:
            if is_project_file(f):
                project_files.append(os.path.join(dirpath, f))
            elif is_solution_file(f):
                solution_files.append(os.path.join(dirpath, f))

    solution_files.sort()
    logger.debug(
        "Scanned %s: %d project(s), %d solution(s)",
        root_path,
        len(project_files),
        len(solution_files),
    )
    return ScanResult(project_files=project_files, solution_files=solution_files)
