"""Version lookup for `--version`."""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "lang-router-plugin"
FALLBACK_VERSION = "0.1.0"

# src/lang_router_plugin/utils/core/version.py -> checkout root
PYPROJECT_PATH = Path(__file__).resolve().parents[4] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """
    Version of the installed distribution, or of the source checkout.

    Raises:
        RuntimeError: If neither the metadata nor pyproject.toml has one
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug(f"{DISTRIBUTION_NAME} is not installed, reading {PYPROJECT_PATH}")

    return _read_version_from_pyproject(PYPROJECT_PATH)


def _read_version_from_pyproject(pyproject_path: Path) -> str:
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise RuntimeError(f"Cannot read {pyproject_path}: {e}") from e

    match data:
        case {"project": {"version": str() as project_version}}:
            return project_version
        case _:
            raise RuntimeError(f"{pyproject_path} has no [project] version")


def get_version() -> str:
    """Project version, or FALLBACK_VERSION when it cannot be determined."""
    try:
        return get_project_version()
    except RuntimeError as e:
        logger.warning(f"Could not determine the version ({e}), using {FALLBACK_VERSION}")
        return FALLBACK_VERSION
