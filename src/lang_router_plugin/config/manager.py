"""
Loading and saving of the plugin's YAML configuration file.

The file is optional: without one every question defaults to "yes" and the
example translations cover English and Czech.
"""

import logging
import os
import tempfile
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..config.schema import PluginConfig
from ..utils.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _read_mapping(config_path: Path) -> dict[str, object]:
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            loaded: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

    match loaded:
        case None:
            return {}
        case dict():
            return loaded  # pyright: ignore[reportUnknownVariableType]
        case _:
            raise ValueError(
                f"{config_path} must contain a YAML dictionary at the top level, "
                f"found {type(loaded).__name__}"
            )


class ConfigManager:
    """Reads, normalizes and writes PluginConfig files."""

    @staticmethod
    def load_config(config_path: Path) -> PluginConfig:
        """
        Read a YAML configuration file into a validated PluginConfig.

        Args:
            config_path: YAML file to read

        Returns:
            PluginConfig: The validated configuration

        Raises:
            FileNotFoundError: If there is no file at `config_path`
            yaml.YAMLError: If the file is not valid YAML
            ValueError: If the top level is not a mapping
            ValidationError: If a value is rejected by the schema
        """
        raw = _read_mapping(config_path)
        return PluginConfig.model_validate(ConfigManager._normalize(raw))

    @staticmethod
    def _normalize(raw: dict[str, object]) -> dict[str, object]:
        """Rewrite shorthand forms into the shape the schema expects."""
        normalized = dict(raw)

        match raw.get("localization"):
            case {"default_language": str() as code, **others}:
                normalized["localization"] = {
                    **others,
                    "default_language": code.strip().lower(),
                }
            case _:
                pass

        # `dependency: "^1.3.0"` only overrides the version
        match raw.get("dependency"):
            case str() as specifier:
                normalized["dependency"] = {"specifier": specifier}
            case _:
                pass

        return normalized

    @staticmethod
    def load_or_default(config_path: Path | None) -> PluginConfig:
        """
        Load `config_path` when given, else fall back to the built-in defaults.

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        if config_path is None:
            logger.debug("No configuration file given, using defaults")
            return PluginConfig()

        try:
            config = ConfigManager.load_config(config_path)
        except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
            raise ConfigurationError(
                f"Could not load {config_path}: {e}",
                user_message=f"Configuration file {config_path} is invalid",
                context=config_path,
            ) from e

        logger.debug(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def save_config(config: PluginConfig, config_path: Path) -> None:
        """
        Write `config` as YAML, replacing `config_path` in a single rename.

        A partially written file never takes the place of the old one.

        Raises:
            OSError: If the file cannot be written
        """
        document = yaml.safe_dump(
            config.model_dump(mode="json"),
            sort_keys=False,
            allow_unicode=True,
        )

        fd, tmp_name = tempfile.mkstemp(
            dir=config_path.parent, prefix=f".{config_path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                _ = tmp.write(document)
            _ = tmp_path.replace(config_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(f"Saved configuration to {config_path}")
