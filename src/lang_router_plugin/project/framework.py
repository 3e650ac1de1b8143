"""
Framework detection and precondition checks for the target project.

The detected facts are returned as an immutable ProjectInfo value that
the generator receives as a parameter.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..utils.core.exceptions import PreconditionError
from .manifest import read_manifest

logger = logging.getLogger(__name__)

SUPPORTED_VUE_MAJOR = 2

ROUTER_PACKAGES = ("vue-router", "@vue/cli-plugin-router")
TYPESCRIPT_PACKAGES = ("@vue/cli-plugin-typescript", "typescript")

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")


@dataclass(frozen=True)
class ProjectInfo:
    """Facts about the target project that steer the source rewrites."""

    vue_version: int | None
    typescript: bool
    has_router: bool

    @property
    def script_ext(self) -> str:
        """Extension of the project's script files."""
        return "ts" if self.typescript else "js"


def _collect_dependencies(manifest: dict[str, object]) -> dict[str, str]:
    collected: dict[str, str] = {}
    for section in _DEPENDENCY_SECTIONS:
        entries = manifest.get(section)
        if not isinstance(entries, dict):
            continue
        for name, specifier in entries.items():  # pyright: ignore[reportUnknownVariableType]
            if isinstance(name, str) and isinstance(specifier, str):
                collected[name] = specifier
    return collected


def parse_major_version(specifier: str) -> int | None:
    """
    Extract the major version from a semver range such as "^2.6.11".

    Args:
        specifier: Version range from package.json

    Returns:
        Major version, or None for tags, URLs and other non-numeric specifiers
    """
    match = re.match(r"^\s*(?:[\^~=v]|>=?)?\s*(\d+)(?:\.|\s|$|x)", specifier)
    if match is None:
        return None
    return int(match.group(1))


def detect_project(project_dir: Path) -> ProjectInfo:
    """
    Inspect package.json of the target project.

    Args:
        project_dir: Root directory of the target project

    Returns:
        ProjectInfo describing the project

    Raises:
        PreconditionError: If package.json is missing or unreadable
    """
    try:
        manifest = read_manifest(project_dir)
    except (OSError, ValueError) as e:
        raise PreconditionError(
            f"Cannot read package.json in {project_dir}: {e}",
            user_message="The target directory does not look like a vue-cli project",
            context=project_dir,
        ) from e

    dependencies = _collect_dependencies(manifest)
    vue_specifier = dependencies.get("vue")
    info = ProjectInfo(
        vue_version=parse_major_version(vue_specifier) if vue_specifier else None,
        typescript=any(name in dependencies for name in TYPESCRIPT_PACKAGES),
        has_router=any(name in dependencies for name in ROUTER_PACKAGES),
    )
    logger.debug(f"Detected project: {info}")
    return info


def check_preconditions(info: ProjectInfo) -> None:
    """
    Make sure the project can be augmented before any file is touched.

    Args:
        info: Detected project facts

    Raises:
        PreconditionError: If the router is missing or Vue has an unsupported major version
    """
    if not info.has_router:
        raise PreconditionError(
            "vue-router is not installed",
            user_message="Add the router first (vue add router), then run this plugin again",
            context=info,
        )

    if info.vue_version is None:
        logger.warning("Could not determine the Vue version, assuming Vue 2")
    elif info.vue_version != SUPPORTED_VUE_MAJOR:
        raise PreconditionError(
            f"Unsupported Vue major version {info.vue_version}",
            user_message=f"Only Vue {SUPPORTED_VUE_MAJOR} projects are supported",
            context=info,
        )
