"""Utility functions for locating projects and resource files.

This module finds the ``.resx`` files of a project and reads the parts of
an MSBuild project file the generator understands: the root namespace, the
generator switches, and per-file ``EmbeddedResource`` metadata.
"""

from pathlib import Path
from typing import Any

from lxml import etree

from .codegen.core.resources import create_secure_parser
from .logging_config import get_logger

logger = get_logger(__name__)

RESOURCE_EXTENSION = ".resx"
PROJECT_FILE_PATTERN = "*.csproj"

# Build output directories never hold source resources
EXCLUDED_DIRECTORIES = {"bin", "obj"}

# MSBuild property -> BuildSettings field
SWITCH_PROPERTIES = {
    "ResXFileCodeGenerator_PublicClass": "public_class",
    "ResXFileCodeGenerator_NullForgivingOperators": "null_forgiving_operators",
    "ResXFileCodeGenerator_StaticClass": "static_class",
}

# EmbeddedResource metadata -> ResourceFileMetadata field
RESOURCE_METADATA = {
    "TargetPath": "target_path",
    "CustomToolNamespace": "custom_tool_namespace",
    "PublicClass": "public_class",
    "StaticClass": "static_class",
}


class ProjectFileError(Exception):
    """Custom exception for project file errors."""

    pass


def find_resource_files(root: str | Path) -> list[Path]:
    """Find all resource files below a directory.

    Args:
        root: Directory to search.

    Returns:
        Resource file paths sorted by their POSIX form.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    root = Path(root)
    logger.debug(f"Searching for resource files under {root}")

    if not root.is_dir():
        logger.error(f"Directory not found: {root}")
        raise FileNotFoundError(f"Directory not found: {root}")

    files = []
    for path in root.rglob("*"):
        if path.suffix.lower() != RESOURCE_EXTENSION:
            continue
        relative = path.relative_to(root)
        if any(part.lower() in EXCLUDED_DIRECTORIES for part in relative.parts[:-1]):
            continue
        if path.is_file():
            files.append(path)

    files.sort(key=lambda path: path.as_posix())
    logger.info(f"Found {len(files)} resource file(s) under {root}")
    return files


def find_project_file(path: str | Path) -> Path | None:
    """Locate the project file for a path.

    Args:
        path: A project file, or a directory containing one.

    Returns:
        The project file, or None if the directory has none.
    """
    path = Path(path)

    if path.is_file():
        return path

    if not path.is_dir():
        logger.warning(f"Path not found: {path}")
        return None

    candidates = sorted(path.glob(PROJECT_FILE_PATTERN))
    if not candidates:
        logger.debug(f"No project file in {path}")
        return None

    if len(candidates) > 1:
        logger.warning(
            f"Multiple project files in {path}; using {candidates[0].name}"
        )
    return candidates[0]


def _local_name(element) -> str:
    return etree.QName(element).localname


def _metadata_value(element, name: str) -> str | None:
    """Item metadata may be written as an attribute or as a child element."""
    value = element.get(name)
    if value is None:
        for child in element.iterchildren(etree.Element):
            if _local_name(child) == name:
                value = child.text
                break
    if value is None or not value.strip():
        return None
    return value.strip()


def load_project_settings(project_file: str | Path) -> dict[str, Any]:
    """Read generator settings from an MSBuild project file.

    The root namespace defaults to the project name, as MSBuild does.

    Args:
        project_file: Path to the ``.csproj`` file.

    Returns:
        Settings dictionary suitable as ``defaults`` for ``load_config``.

    Raises:
        ProjectFileError: If the file cannot be read or is not valid XML.
    """
    project_file = Path(project_file)
    logger.debug(f"Reading project file: {project_file}")

    try:
        with project_file.open("rb") as f:
            tree = etree.parse(f, create_secure_parser())
    except etree.XMLSyntaxError as e:
        logger.error(f"Invalid project file {project_file}: {e}")
        raise ProjectFileError(f"Invalid project file {project_file}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading project file {project_file}: {e}")
        raise ProjectFileError(
            f"Error reading project file {project_file}: {e}"
        ) from e

    settings: dict[str, Any] = {
        "project_dir": str(project_file.resolve().parent),
        "root_namespace": project_file.stem,
    }
    files: dict[str, dict[str, str]] = {}

    for element in tree.getroot().iter(etree.Element):
        name = _local_name(element)
        text = (element.text or "").strip()

        if name == "RootNamespace" and text:
            settings["root_namespace"] = text
        elif name in SWITCH_PROPERTIES and text:
            settings[SWITCH_PROPERTIES[name]] = text
        elif name == "EmbeddedResource":
            include = element.get("Update") or element.get("Include")
            if not include or not include.lower().endswith(RESOURCE_EXTENSION):
                continue

            metadata = {}
            for metadata_name, field_name in RESOURCE_METADATA.items():
                value = _metadata_value(element, metadata_name)
                if value is not None:
                    metadata[field_name] = value

            if metadata:
                files[include.replace("\\", "/")] = metadata

    settings["files"] = files
    logger.info(
        f"Project {project_file.name}: root namespace "
        f"'{settings['root_namespace']}', {len(files)} resource override(s)"
    )
    return settings
