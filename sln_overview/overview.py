"""Reconciliation engine: classify discovered projects by owning solution."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import structlog

from sln_overview.models.project import ProjectFile
from sln_overview.models.solution import ScanResult, Solution
from sln_overview.parsers.project import ProjectParser
from sln_overview.parsers.solution import SolutionParser
from sln_overview.scanner import scan_tree

log = structlog.get_logger("sln_overview.engine")


def path_key(path: str) -> str:
    """Lower-cased absolute path used for solution membership checks.

    Matching is case-insensitive on every platform, so two files whose paths
    differ only by case are treated as the same project.
    """
    return os.path.normpath(os.path.abspath(path)).lower()


@dataclass
class Overview:
    """Result of a full discover + reconcile run."""

    search_path: str
    scan: ScanResult
    projects: list[ProjectFile] = field(default_factory=list)

    @property
    def has_solutions(self) -> bool:
        return bool(self.scan.solution_files)


def collect_projects(
    project_files: list[str],
    solution_files: list[str],
    project_parser: ProjectParser | None = None,
    solution_parser: SolutionParser | None = None,
) -> list[ProjectFile]:
    """Parse every project, tagging each with the solution(s) that reference it.

    Output order: solution-owned records grouped by solution (in the order of
    *solution_files*), then dangling projects sorted by path. A project listed
    by N solutions is emitted N times.
    """
    project_parser = project_parser or ProjectParser()
    solution_parser = solution_parser or SolutionParser()

    if not solution_files:
        return [project_parser.parse(f) for f in sorted(project_files)]

    solutions: list[Solution] = [solution_parser.parse(f) for f in solution_files]

    claimed = {path_key(p) for s in solutions for p in s.project_paths}

    projects: list[ProjectFile] = []
    for solution in solutions:
        for project_path in solution.project_paths:
            if not os.path.isfile(project_path):
                log.debug(
                    "overview.stale_reference",
                    solution=solution.name,
                    project_path=project_path,
                )
                continue
            project = project_parser.parse(project_path)
            project.solution_file_name = solution.name
            projects.append(project)

    dangling = sorted(f for f in project_files if path_key(f) not in claimed)
    log.debug(
        "overview.reconciled",
        solutions=len(solutions),
        owned=len(projects),
        dangling=len(dangling),
    )
    projects.extend(project_parser.parse(f) for f in dangling)
    return projects


def relativize_paths(projects: list[ProjectFile], search_path: str) -> None:
    """Rewrite every project's path relative to *search_path*, in place."""
    for project in projects:
        project.path = os.path.relpath(project.path, search_path)


def build_overview(search_path: str | os.PathLike, absolute_paths: bool = False) -> Overview:
    """Scan *search_path*, reconcile projects against solutions and present paths.

    The caller must check that *search_path* is an existing directory.
    """
    root = os.path.abspath(search_path)
    scan = scan_tree(root)
    projects = collect_projects(scan.project_files, scan.solution_files)
    if not absolute_paths:
        relativize_paths(projects, root)
    return Overview(search_path=root, scan=scan, projects=projects)
