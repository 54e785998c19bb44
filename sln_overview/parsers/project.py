"""Parser for .csproj project files."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET

from sln_overview.exceptions import (
    DescriptorNotFoundError,
    InvalidArgumentError,
    MalformedDescriptorError,
)
from sln_overview.models.project import ProjectFile

logger = logging.getLogger(__name__)

_NS = "{http://schemas.microsoft.com/developer/msbuild/2003}"

# Property scopes searched in order: legacy namespaced, then plain
_SCOPES: tuple[str, ...] = (_NS, "")


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _text(element: ET.Element) -> str | None:
    value = "".join(element.itertext()).strip()
    return value or None


class ProjectParser:
    """Read project metadata (SDK, target framework, version, ...) from a .csproj."""

    def parse(self, file_path: str | os.PathLike) -> ProjectFile:
        if not file_path or not os.fspath(file_path):
            raise InvalidArgumentError("project file path must not be empty")

        path = os.path.abspath(file_path)
        if not os.path.isfile(path):
            raise DescriptorNotFoundError("Project", path)

        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise MalformedDescriptorError("project", path, str(e)) from e

        sdk = self._get_sdk(root)

        if sdk is not None:
            target_framework = self._get_property(root, "TargetFramework") or self._get_property(
                root, "TargetFrameworks"
            )
        else:
            target_framework = self._get_property(root, "TargetFrameworkVersion")

        version = self._get_property(root, "Version")
        if not version:
            version = self._compose_version(
                self._get_property(root, "VersionPrefix"),
                self._get_property(root, "VersionSuffix"),
            )

        name = os.path.splitext(os.path.basename(path))[0]
        logger.debug("Parsed project %s (sdk=%s, tfm=%s)", name, sdk, target_framework)

        return ProjectFile(
            name=name,
            path=path,
            sdk=sdk,
            target_framework=target_framework,
            output_type=self._get_property(root, "OutputType"),
            authors=self._get_property(root, "Authors"),
            version=version,
        )

    @staticmethod
    def _get_sdk(root: ET.Element) -> str | None:
        value = root.get("Sdk")
        if value is None or not value.strip():
            return None
        return value.strip()

    @staticmethod
    def _get_property(root: ET.Element, name: str) -> str | None:
        """Return the first non-blank <name> inside a top-level PropertyGroup.

        The namespaced scope is searched through every group before the plain one.
        """
        if _local_name(root.tag) != "Project":
            return None
        for ns in _SCOPES:
            for group in root.findall(f"{ns}PropertyGroup"):
                for prop in group.findall(f"{ns}{name}"):
                    value = _text(prop)
                    if value:
                        return value
        return None

    @staticmethod
    def _compose_version(prefix: str | None, suffix: str | None) -> str | None:
        if not prefix:
            return None
        return f"{prefix}-{suffix}" if suffix else prefix
