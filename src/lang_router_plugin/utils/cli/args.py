"""
Command-line interface of the lang router plugin.

`lang-router-plugin [PROJECT_DIR] [--config-file PATH] [--write-config PATH] [--yes] [--verbose]`
"""

import argparse
import sys
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version

EPILOG = """
Examples:
  lang-router-plugin
    Augment the project in the current directory, asking before each optional step

  lang-router-plugin ~/projects/shop --yes
    Use the default answers without prompting

  lang-router-plugin ~/projects/shop --config-file lang-router.yml
    Take languages and answers from a configuration file

  lang-router-plugin ~/projects/shop --write-config lang-router.yml
    Save the answers given in this run for the next one
"""


class PathValidationError(Exception):
    """A path given on the command line is unusable."""


class ParsedArgs(NamedTuple):
    """Validated command-line options."""

    project_dir: Path
    config_file: Path | None
    write_config: Path | None
    assume_yes: bool
    verbose: bool


def _resolve(path_str: str, what: str) -> Path:
    try:
        return Path(path_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid {what} path {path_str!r}: {e}") from e


def validate_project_dir(path_str: str) -> Path:
    """
    Resolve the project root and make sure it is an existing directory.

    Raises:
        PathValidationError: If the path cannot be resolved or is not a directory
    """
    path = _resolve(path_str, "project directory")
    if not path.exists():
        raise PathValidationError(f"Project directory {path} does not exist")
    if not path.is_dir():
        raise PathValidationError(f"{path} is not a directory")
    return path


def validate_config_file_path(path_str: str) -> Path:
    """
    Resolve the configuration file and make sure it exists.

    Raises:
        PathValidationError: If the path cannot be resolved or is not a file
    """
    path = _resolve(path_str, "config file")
    if not path.exists():
        raise PathValidationError(f"Config file {path} does not exist")
    if path.is_dir():
        raise PathValidationError(f"{path} is a directory, expected a YAML file")
    return path


def validate_write_config_path(path_str: str) -> Path:
    """
    Resolve where the configuration is saved; its directory must exist.

    Raises:
        PathValidationError: If the path cannot be resolved or names a directory
    """
    path = _resolve(path_str, "output config file")
    if path.is_dir():
        raise PathValidationError(f"{path} is a directory, expected a YAML file")
    if not path.parent.is_dir():
        raise PathValidationError(f"Directory {path.parent} does not exist")
    return path


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the parser for the lang-router-plugin command."""
    parser = argparse.ArgumentParser(
        prog="lang-router-plugin",
        description="Add localized routing (vue-lang-router) to a vue-cli project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    _ = parser.add_argument(
        "project_dir",
        nargs="?",
        default=".",
        metavar="PROJECT_DIR",
        help="Root directory of the vue-cli project (default: %(default)s)",
    )
    _ = parser.add_argument(
        "--config-file",
        metavar="PATH",
        help="YAML file with plugin options, languages and the dependency specifier",
    )
    _ = parser.add_argument(
        "--write-config",
        metavar="PATH",
        help="Save the configuration with this run's answers to a YAML file",
    )
    _ = parser.add_argument(
        "-y",
        "--yes",
        dest="assume_yes",
        action="store_true",
        help="Do not prompt; use the configured or default answers",
    )
    _ = parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug output"
    )
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse and validate the command line.

    Args:
        args: Arguments to parse; sys.argv[1:] when None

    Returns:
        ParsedArgs with resolved paths

    Raises:
        SystemExit: On --help, --version, usage errors and invalid paths
    """
    namespace = create_argument_parser().parse_args(args)
    config_file: str | None = namespace.config_file
    write_config: str | None = namespace.write_config

    try:
        project_dir = validate_project_dir(namespace.project_dir)
        config_path = validate_config_file_path(config_file) if config_file else None
        output_path = validate_write_config_path(write_config) if write_config else None
    except PathValidationError as e:
        print(f"lang-router-plugin: error: {e}", file=sys.stderr)
        sys.exit(1)

    return ParsedArgs(
        project_dir=project_dir,
        config_file=config_path,
        write_config=output_path,
        assume_yes=namespace.assume_yes,
        verbose=namespace.verbose,
    )
