"""Handler for XML-based .slnx files."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from sln_overview.exceptions import MalformedDescriptorError
from sln_overview.parsers.registry import register_format


class XmlSolutionFormat:
    format_name = "slnx"
    extensions = [".slnx"]

    def read_project_paths(self, file_path: Path) -> list[str]:
        try:
            root = ET.parse(file_path).getroot()
        except ET.ParseError as e:
            raise MalformedDescriptorError("solution", file_path, str(e)) from e

        # <Project> may sit directly under <Solution> or inside nested <Folder>s
        paths: list[str] = []
        for project_el in root.iter("Project"):
            path = project_el.get("Path")
            if path and path.strip():
                paths.append(path.strip())
        return paths


register_format(XmlSolutionFormat())
