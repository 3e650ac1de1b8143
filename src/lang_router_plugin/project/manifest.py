"""
package.json access for the target project.

Reads the manifest for precondition checks and adds the routing
localization dependency while keeping the file's formatting.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def manifest_path(project_dir: Path) -> Path:
    """Path of package.json inside the project."""
    return project_dir / MANIFEST_NAME


def read_manifest(project_dir: Path) -> dict[str, object]:
    """
    Load package.json as a dictionary.

    Args:
        project_dir: Root directory of the target project

    Returns:
        Parsed manifest

    Raises:
        FileNotFoundError: If package.json does not exist
        ValueError: If package.json is not a JSON object
    """
    path = manifest_path(project_dir)
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))  # pyright: ignore[reportAny]
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return data  # pyright: ignore[reportUnknownVariableType]


def _detect_indent(content: str) -> int | str:
    match = re.search(r"^([ \t]+)\"", content, re.MULTILINE)
    if match is None:
        return 2
    indent = match.group(1)
    return indent if "\t" in indent else len(indent)


def add_dependency(project_dir: Path, name: str, specifier: str) -> bool:
    """
    Declare `name` under "dependencies" in package.json.

    The file's indentation and trailing newline are kept. An entry that
    already carries `specifier` is left alone.

    Args:
        project_dir: Root directory of the target project
        name: Package name
        specifier: Version range or source specifier

    Returns:
        True if package.json was written, False if it already declared the dependency

    Raises:
        FileNotFoundError: If package.json does not exist
        ValueError: If package.json is not a JSON object
    """
    path = manifest_path(project_dir)
    manifest = read_manifest(project_dir)

    raw_dependencies = manifest.get("dependencies")
    dependencies: dict[str, object] = (
        raw_dependencies if isinstance(raw_dependencies, dict) else {}  # pyright: ignore[reportUnknownVariableType]
    )
    if dependencies.get(name) == specifier:
        logger.info(f"{name} is already declared in {MANIFEST_NAME}")
        return False

    dependencies[name] = specifier
    manifest["dependencies"] = dict(sorted(dependencies.items()))

    content = path.read_text(encoding="utf-8")
    output = json.dumps(manifest, indent=_detect_indent(content), ensure_ascii=False)
    if content.endswith("\n"):
        output += "\n"
    _ = path.write_text(output, encoding="utf-8")

    logger.info(f"Added {name}@{specifier} to {MANIFEST_NAME}")
    return True
