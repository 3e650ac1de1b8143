"""
Main entry point for the lang router plugin.

This module parses arguments, sets up logging, loads configuration, asks
the interactive questions and runs the generation pass against the
target project.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config.manager import ConfigManager
from .config.schema import PluginConfig
from .generator import apply_plugin
from .prompts import ask_options
from .utils.cli.args import parse_arguments
from .utils.core.exceptions import ConfigurationError, LangRouterPluginError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """
    Configure console logging with leveled, colored output.

    Args:
        verbose: Enable debug messages
        console: Console to log to (defaults to stderr)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)


def save_answers(config: PluginConfig, config_path: Path) -> None:
    """
    Write the configuration used for this run so it can be replayed.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    try:
        ConfigManager.save_config(config, config_path)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to save configuration to {config_path}: {e}",
            user_message=f"Could not write {config_path}",
            context=config_path,
        ) from e
    logger.info(f"Saved configuration to {config_path}")


def main(args: list[str] | None = None) -> int:
    """
    Run the plugin from the command line.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parsed_args = parse_arguments(args)
    setup_logging(parsed_args.verbose)

    try:
        config = ConfigManager.load_or_default(parsed_args.config_file)
        options = ask_options(config.options, assume_yes=parsed_args.assume_yes)
        if parsed_args.write_config is not None:
            answered = config.model_copy(update={"options": options})
            save_answers(answered, parsed_args.write_config)
        report = apply_plugin(parsed_args.project_dir, options, config)
    except LangRouterPluginError as e:
        logger.debug(f"{e.category.value} error ({e.severity.value}): {e}")
        logger.error(e.user_message)
        return 1

    logger.info(str(report))
    if report.warnings:
        logger.warning("Some steps need to be finished manually, see the warnings above")
    return 0
