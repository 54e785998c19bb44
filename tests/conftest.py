"""Shared pytest fixtures for sln-overview tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SDK_CSPROJ = """\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
  </PropertyGroup>
</Project>
"""

SLN_HEADER = "Microsoft Visual Studio Solution File, Format Version 12.00\n"
CSHARP_TYPE_GUID = "{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}"


@pytest.fixture
def make_csproj(tmp_path: Path):
    """Create ``<root>/<name>/<name>.csproj`` and return its path."""

    def _make(name: str, content: str = SDK_CSPROJ, root: Path | None = None) -> Path:
        project_dir = (root or tmp_path) / name
        project_dir.mkdir(parents=True, exist_ok=True)
        path = project_dir / f"{name}.csproj"
        path.write_text(content)
        return path

    return _make


@pytest.fixture
def make_slnx(tmp_path: Path):
    """Create ``<root>/<name>.slnx`` listing ``<p>/<p>.csproj`` for each project name."""

    def _make(name: str, projects: list[str], root: Path | None = None) -> Path:
        entries = "\n".join(f'  <Project Path="{p}/{p}.csproj" />' for p in projects)
        path = (root or tmp_path) / f"{name}.slnx"
        path.write_text(f"<Solution>\n{entries}\n</Solution>\n")
        return path

    return _make


@pytest.fixture
def make_sln(tmp_path: Path):
    """Create a legacy ``<root>/<name>.sln`` listing ``<p>\\<p>.csproj`` entries."""

    def _make(name: str, projects: list[str], root: Path | None = None) -> Path:
        lines = [SLN_HEADER]
        for i, p in enumerate(projects, start=1):
            lines.append(
                f'Project("{CSHARP_TYPE_GUID}") = "{p}", "{p}\\{p}.csproj", '
                f'"{{00000000-0000-0000-0000-{i:012d}}}"\n'
            )
            lines.append("EndProject\n")
        lines.append("Global\nEndGlobal\n")
        path = (root or tmp_path) / f"{name}.sln"
        path.write_text("".join(lines))
        return path

    return _make
