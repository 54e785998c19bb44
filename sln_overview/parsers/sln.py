"""Handler for legacy line-oriented .sln files."""

from __future__ import annotations

import re
from pathlib import Path

from sln_overview.exceptions import MalformedDescriptorError
from sln_overview.parsers.registry import register_format

_HEADER_RE = re.compile(r"^Microsoft Visual Studio Solution File, Format Version\s+\S+")

# Project("{type-guid}") = "Name", "Relative\Path.csproj", "{project-guid}"
_PROJECT_RE = re.compile(
    r'^Project\(\s*"(?P<type>[^"]*)"\s*\)'
    r'\s*=\s*"(?P<name>[^"]*)"'
    r'\s*,\s*"(?P<path>[^"]*)"'
    r'\s*,\s*"(?P<guid>[^"]*)"'
)


class LegacySolutionFormat:
    format_name = "sln"
    extensions = [".sln"]

    def read_project_paths(self, file_path: Path) -> list[str]:
        content = file_path.read_text(encoding="utf-8-sig", errors="replace")

        has_header = False
        open_entry: str | None = None
        paths: list[str] = []

        for lineno, raw_line in enumerate(content.splitlines(), start=1):
            line = raw_line.strip()
            if not line:
                continue

            if not has_header:
                if line.startswith("#"):
                    continue
                if not _HEADER_RE.match(line):
                    raise MalformedDescriptorError(
                        "solution", file_path, f"missing solution file header at line {lineno}"
                    )
                has_header = True
                continue

            m = _PROJECT_RE.match(line)

            if open_entry is not None:
                if m:
                    raise MalformedDescriptorError(
                        "solution",
                        file_path,
                        f"unterminated Project entry for '{open_entry}' at line {lineno}",
                    )
                if line == "EndProject":
                    paths.append(open_entry)
                    open_entry = None
                continue

            if m:
                open_entry = m.group("path")

        if not has_header:
            raise MalformedDescriptorError("solution", file_path, "missing solution file header")
        if open_entry is not None:
            raise MalformedDescriptorError(
                "solution", file_path, f"unterminated Project entry for '{open_entry}'"
            )
        return paths


register_format(LegacySolutionFormat())
