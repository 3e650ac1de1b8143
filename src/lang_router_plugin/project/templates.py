"""
Example file rendering for the target project.

Copies the bundled template tree into the project, substituting
`__KEY__` tokens in file names and text contents, and seeds one
translation table per configured language.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..config.schema import LocalizationConfig
from ..utils.core.exceptions import TemplateError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
EXAMPLE_TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / "translations"
TRANSLATIONS_DIR = Path("src") / "lang" / "translations"


def build_context(localization: LocalizationConfig) -> dict[str, str]:
    """
    Build the token substitutions for the bundled templates.

    Args:
        localization: Languages and default language to render

    Returns:
        Mapping of template token to replacement text
    """
    entries = [
        f"  {code}: {{\n"
        f"    name: {json.dumps(language.name, ensure_ascii=False)},\n"
        f"    file: '{language.file}',\n"
        f"  }},"
        for code, language in localization.languages.items()
    ]
    return {
        "__TRANSLATIONS__": "\n".join(entries),
        "__DEFAULT_LANGUAGE__": localization.default_language,
    }


def _substitute(text: str, context: dict[str, str]) -> str:
    for token, replacement in context.items():
        text = text.replace(token, replacement)
    return text


def render_templates(
    template_dir: Path, project_dir: Path, context: dict[str, str]
) -> list[Path]:
    """
    Materialize the template tree inside the project.

    Files that already exist in the project are never overwritten.

    Args:
        template_dir: Root of the template tree
        project_dir: Root directory of the target project
        context: Token substitutions applied to names and contents

    Returns:
        Paths of the files that were written

    Raises:
        TemplateError: If the template directory is missing or a file cannot be copied
    """
    if not template_dir.is_dir():
        raise TemplateError(f"Template directory not found: {template_dir}")

    written: list[Path] = []
    for source in sorted(template_dir.rglob("*")):
        if not source.is_file():
            continue

        relative = Path(_substitute(source.relative_to(template_dir).as_posix(), context))
        target = project_dir / relative
        if target.exists():
            logger.info(f"{relative.as_posix()} already exists, skipping")
            continue

        try:
            content = _substitute(source.read_text(encoding="utf-8"), context)
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(
                f"Failed to render {relative.as_posix()}: {e}", context=source
            ) from e

        written.append(target)
        logger.debug(f"Rendered {relative.as_posix()}")

    return written


def write_missing_translations(
    project_dir: Path,
    localization: LocalizationConfig,
    examples_dir: Path = EXAMPLE_TRANSLATIONS_DIR,
) -> list[Path]:
    """
    Create the translation table of each configured language that has none.

    A bundled example table with the same file name is copied when one
    exists; otherwise the table starts out empty.

    Args:
        project_dir: Root directory of the target project
        localization: Configured languages
        examples_dir: Directory holding the bundled example tables

    Returns:
        Paths of the files that were created

    Raises:
        TemplateError: If a table cannot be written
    """
    created: list[Path] = []
    for language in localization.languages.values():
        target = project_dir / TRANSLATIONS_DIR / language.file
        if target.exists():
            continue

        example = examples_dir / language.file
        try:
            content = example.read_text(encoding="utf-8") if example.is_file() else "{}\n"
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Failed to write {language.file}: {e}", context=target) from e

        created.append(target)
        logger.debug(f"Created {(TRANSLATIONS_DIR / language.file).as_posix()}")
    return created
