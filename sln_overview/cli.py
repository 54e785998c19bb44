"""CLI entry points.

    sln-overview [PATH]        # Table of projects grouped by solution
    sln-overview . --json      # Same inventory as a JSON array
    sln-open [PATH]            # Open the solution file found under PATH
"""

from __future__ import annotations

import os
import sys

import click

from sln_overview import __version__
from sln_overview.core.logging import setup_logging
from sln_overview.exceptions import OverviewError


def _resolve_search_path(path: str | None) -> str:
    """Absolute search path, defaulting to the current directory."""
    return os.path.abspath(path) if path else os.getcwd()


def _require_directory(search_path: str) -> None:
    if not os.path.isdir(search_path):
        click.echo(f"Path does not exist: {click.style(search_path, fg='green')}.")
        sys.exit(1)


# sln-overview


@click.command()
@click.argument("path", required=False)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option(
    "-p", "--show-paths", is_flag=True,
    help="Show project file paths (relative to search path) instead of name",
)
@click.option("-a", "--absolute-paths", is_flag=True, help="Show absolute paths instead of relative")
@click.option("-j", "--json", "as_json", is_flag=True, help="Format the result as JSON")
@click.option("--verbose", is_flag=True, help="Verbose logging")
def overview_main(
    path: str | None,
    show_paths: bool,
    absolute_paths: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Show an overview of the .csproj projects under PATH, grouped by solution."""
    setup_logging("DEBUG" if verbose else None)

    from sln_overview.overview import build_overview
    from sln_overview.render import (
        DANGLING_TITLE,
        format_projects,
        group_by_solution,
        projects_to_json,
    )

    search_path = _resolve_search_path(path)
    _require_directory(search_path)

    try:
        overview = build_overview(search_path, absolute_paths=absolute_paths)
    except (OverviewError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not overview.scan.project_files:
        click.echo("No csproj files found in path.")
        return

    if as_json:
        click.echo(projects_to_json(overview.projects))
        return

    if overview.has_solutions:
        for solution_name, group in group_by_solution(overview.projects):
            if solution_name is None:
                continue
            click.echo(format_projects(group, show_paths, solution_name))

        dangling = [p for p in overview.projects if p.is_dangling]
        if dangling:
            click.echo(format_projects(dangling, show_paths, DANGLING_TITLE))
    else:
        click.echo(format_projects(overview.projects, show_paths))

    count = click.style(str(len(overview.scan.project_files)), fg="green")
    click.echo(f"Found {count} project(s).")


# sln-open


def _open_file(file_path: str) -> None:
    click.echo(f"Opening {click.style(file_path, fg='green')}.")
    click.launch(file_path)


@click.command()
@click.argument("path", required=False)
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option("-f", "--first", is_flag=True, help="Open first solution if multiple are found.")
@click.option("--verbose", is_flag=True, help="Verbose logging")
def open_main(path: str | None, first: bool, verbose: bool) -> None:
    """Open the .sln or .slnx file found under PATH with its default application."""
    setup_logging("DEBUG" if verbose else None)

    from sln_overview.scanner import scan_tree

    search_path = _resolve_search_path(path)
    _require_directory(search_path)

    files = scan_tree(search_path).solution_files

    if not files:
        click.echo("No solution (.sln or .slnx) found in path.")
        return

    if len(files) == 1:
        _open_file(files[0])
        return

    click.echo(
        f"Found {click.style(str(len(files)), fg='green')} solutions in "
        f"{click.style(search_path, fg='green')}."
    )

    if first:
        _open_file(files[0])
        return

    for i, file_path in enumerate(files, start=1):
        click.echo(f"  {i:2d}. {os.path.relpath(file_path, search_path)}")
    try:
        choice = click.prompt("Select which to open", type=click.IntRange(1, len(files)))
    except click.Abort:
        click.echo()
        sys.exit(1)

    _open_file(files[choice - 1])


if __name__ == "__main__":
    overview_main()
