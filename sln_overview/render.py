"""Text table and JSON formatting for project lists."""

from __future__ import annotations

import json

import click

from sln_overview.models.project import ProjectFile

DANGLING_TITLE = "Dangling (not part of any solution)"

_HEADERS = ("Project", "Target framework", "SDK")


def _row(project: ProjectFile, show_paths: bool) -> tuple[str, str, str]:
    return (
        project.path if show_paths else project.name,
        project.target_framework or "",
        project.sdk or "",
    )


def format_projects(
    projects: list[ProjectFile],
    show_paths: bool = False,
    title: str | None = None,
) -> str:
    """Render projects as a fixed-width table, with an optional title line."""
    rows = [_row(p, show_paths) for p in projects]
    widths = [max(len(cell) for cell in column) for column in zip(_HEADERS, *rows)]

    def _line(cells: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    lines: list[str] = []
    if title is not None:
        lines.append(click.style(title, bold=True))
    lines.append(click.style(_line(_HEADERS), fg="green"))
    lines.append(click.style("  ".join("-" * w for w in widths), fg="green"))
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"


def group_by_solution(
    projects: list[ProjectFile],
) -> list[tuple[str | None, list[ProjectFile]]]:
    """Group records by solution file name, keeping first-appearance order."""
    groups: dict[str | None, list[ProjectFile]] = {}
    for p in projects:
        groups.setdefault(p.solution_file_name, []).append(p)
    return list(groups.items())


def projects_to_json(projects: list[ProjectFile]) -> str:
    return json.dumps([p.to_dict() for p in projects], indent=2)
