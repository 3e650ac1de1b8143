"""
Generation pass for the lang router plugin.

This module wires the pure text transforms from the transform package to
the files of a vue-cli project: the router bootstrap file, the entry file
and App.vue. Each file is read once, transformed in memory and written
once. A file that cannot be read is reported and skipped without
affecting the others.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import override

from .config.schema import PluginConfig, PluginOptions
from .project.framework import ProjectInfo, check_preconditions, detect_project
from .project.manifest import add_dependency
from .project.templates import (
    TEMPLATE_DIR,
    build_context,
    render_templates,
    write_missing_translations,
)
from .transform import (
    LANGUAGE_SWITCHER_SNIPPET,
    InstallOptions,
    add_import,
    contains_tag,
    has_construction,
    has_install_directive,
    inject_root_option,
    insert_after_tag,
    replace_construction,
    replace_install_directive,
    rewrite_markup_tag,
)
from .utils.core.exceptions import TemplateError

logger = logging.getLogger(__name__)

HOST = "Vue"
SOURCE_ROUTER = "VueRouter"
TARGET_ROUTER = "LangRouter"
ROUTER_LINK_TAG = "router-link"
LOCALIZED_LINK_TAG = "localized-link"
LANGUAGE_SWITCHER_TAG = "language-switcher"
TRANSLATIONS_MODULE = "../lang/translations"

Transform = Callable[[str], tuple[str, list[str]]]


class FileStatus(Enum):
    """Outcome of processing a single project file."""

    MODIFIED = "modified"
    UNCHANGED = "unchanged"
    MISSING = "missing"


@dataclass
class FileResult:
    """Result of processing a single project file."""

    path: Path
    status: FileStatus
    warnings: list[str] = field(default_factory=list)


class GenerationReport:
    """Result of a generation pass."""

    def __init__(self) -> None:
        self.files: list[FileResult] = []
        self.rendered_files: list[Path] = []
        self.dependency_added: bool = False

    @property
    def modified(self) -> list[Path]:
        """Files that were rewritten."""
        return [r.path for r in self.files if r.status is FileStatus.MODIFIED]

    @property
    def missing(self) -> list[Path]:
        """Files that could not be read."""
        return [r.path for r in self.files if r.status is FileStatus.MISSING]

    @property
    def warnings(self) -> list[str]:
        """All warnings collected while transforming."""
        return [w for r in self.files for w in r.warnings]

    def status_of(self, path: Path) -> FileStatus | None:
        """Status recorded for `path`, or None if it was not processed."""
        for result in self.files:
            if result.path == path:
                return result.status
        return None

    @override
    def __str__(self) -> str:
        """String representation of the generation results."""
        return (
            f"Generation Results: "
            f"{len(self.modified)} modified, "
            f"{len(self.missing)} missing, "
            f"{len(self.rendered_files)} rendered, "
            f"{len(self.warnings)} warnings"
        )


def router_transform(config: PluginConfig, options: PluginOptions) -> Transform:
    """
    Build the transform that swaps VueRouter for LangRouter.

    When example files are rendered, the router also imports the example
    translation tables and passes them to the install directive.
    """
    library = config.dependency.name

    def _transform(text: str) -> tuple[str, list[str]]:
        warnings: list[str] = []

        text = add_import(
            text, SOURCE_ROUTER, f"import {{ {TARGET_ROUTER} }} from '{library}'"
        )

        install_options = None
        if options.render_template:
            text = add_import(
                text,
                "translations",
                f"import {{ translations, localizedURLs }} from '{TRANSLATIONS_MODULE}'",
            )
            install_options = InstallOptions(
                default_language=config.localization.default_language,
                translations="translations",
                localized_urls="localizedURLs",
            )

        text = replace_install_directive(
            text, HOST, SOURCE_ROUTER, TARGET_ROUTER, install_options
        )
        if not has_install_directive(text, HOST, TARGET_ROUTER):
            warnings.append(
                f"{HOST}.use({SOURCE_ROUTER}) not found, register {TARGET_ROUTER} manually"
            )

        text = replace_construction(text, SOURCE_ROUTER, TARGET_ROUTER)
        if not has_construction(text, TARGET_ROUTER):
            warnings.append(
                f"new {SOURCE_ROUTER} not found, construct {TARGET_ROUTER} manually"
            )

        return text, warnings

    return _transform


def main_transform(config: PluginConfig) -> Transform:
    """Build the transform that wires i18n into the entry file."""
    library = config.dependency.name

    def _transform(text: str) -> tuple[str, list[str]]:
        warnings: list[str] = []
        text = add_import(text, "i18n", f"import {{ i18n }} from '{library}'")
        if not has_construction(text, HOST):
            warnings.append(f"new {HOST}({{...}}) not found, add i18n to the root options manually")
        return inject_root_option(text, "i18n", HOST), warnings

    return _transform


def app_transform(options: PluginOptions) -> Transform:
    """Build the transform for App.vue markup."""

    def _transform(text: str) -> tuple[str, list[str]]:
        warnings: list[str] = []

        if options.add_language_switcher:
            if contains_tag(text, LANGUAGE_SWITCHER_TAG):
                logger.info(f"<{LANGUAGE_SWITCHER_TAG}> already present in App.vue")
            else:
                inserted = insert_after_tag(text, LANGUAGE_SWITCHER_SNIPPET)
                if inserted == text:
                    warnings.append(
                        f"No <div> found in App.vue, add <{LANGUAGE_SWITCHER_TAG}> manually"
                    )
                text = inserted

        if options.rewrite_router_link:
            text = rewrite_markup_tag(
                text, ROUTER_LINK_TAG, LOCALIZED_LINK_TAG, LANGUAGE_SWITCHER_TAG
            )
        return text, warnings

    return _transform


def process_file(path: Path, transform: Transform, missing_message: str) -> FileResult:
    """
    Read, transform and write back a single file.

    Args:
        path: File to process
        transform: Pure text transform returning the new text and warnings
        missing_message: Warning logged when the file cannot be read

    Returns:
        FileResult describing what happened
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        logger.warning(missing_message)
        return FileResult(path=path, status=FileStatus.MISSING, warnings=[missing_message])

    new_content, warnings = transform(content)
    for warning in warnings:
        logger.warning(warning)

    if new_content == content:
        logger.info(f"{path.name} is already up to date")
        return FileResult(path=path, status=FileStatus.UNCHANGED, warnings=warnings)

    try:
        _ = path.write_text(new_content, encoding="utf-8")
    except OSError as e:
        message = f"Failed to write {path}: {e}"
        logger.error(message)
        return FileResult(path=path, status=FileStatus.UNCHANGED, warnings=[*warnings, message])

    logger.info(f"Updated {path.name}")
    return FileResult(path=path, status=FileStatus.MODIFIED, warnings=warnings)


def generate(
    project_dir: Path,
    options: PluginOptions,
    project_info: ProjectInfo,
    config: PluginConfig,
) -> GenerationReport:
    """
    Rewrite the router file, the entry file and, if enabled, App.vue.

    Args:
        project_dir: Root directory of the target project
        options: Feature switches
        project_info: Detected framework facts
        config: Plugin configuration

    Returns:
        GenerationReport listing the outcome for every file
    """
    report = GenerationReport()
    src = project_dir / "src"
    ext = project_info.script_ext

    report.files.append(
        process_file(
            src / "router" / f"index.{ext}",
            router_transform(config, options),
            f"Router file not found, make sure to add {TARGET_ROUTER} manually!",
        )
    )
    report.files.append(
        process_file(
            src / f"main.{ext}",
            main_transform(config),
            "Main file not found, make sure to import i18n manually!",
        )
    )

    if options.rewrite_router_link or options.add_language_switcher:
        report.files.append(
            process_file(
                src / "App.vue",
                app_transform(options),
                "App.vue not found, skipping <router-link> replacement and <language-switcher> example.",
            )
        )

    return report


def apply_plugin(
    project_dir: Path, options: PluginOptions, config: PluginConfig
) -> GenerationReport:
    """
    Run the whole plugin against a project.

    Preconditions are checked before anything is written. Afterwards the
    dependency is declared, example files are rendered when enabled, and
    the source files are rewritten.

    Args:
        project_dir: Root directory of the target project
        options: Feature switches
        config: Plugin configuration

    Returns:
        GenerationReport for the pass

    Raises:
        PreconditionError: If the project cannot be augmented
    """
    project_info = detect_project(project_dir)
    check_preconditions(project_info)

    dependency_added = False
    try:
        dependency_added = add_dependency(
            project_dir, config.dependency.name, config.dependency.specifier
        )
    except (OSError, ValueError) as e:
        logger.error(
            f"Failed to update package.json: {e}. Add {config.dependency.name} manually."
        )

    rendered: list[Path] = []
    if options.render_template:
        try:
            rendered = render_templates(
                TEMPLATE_DIR, project_dir, build_context(config.localization)
            )
            rendered.extend(write_missing_translations(project_dir, config.localization))
        except TemplateError as e:
            logger.warning(f"Example files were not rendered: {e}")
            # The router must not import files that do not exist
            options = options.model_copy(update={"render_template": False})

    report = generate(project_dir, options, project_info, config)
    report.dependency_added = dependency_added
    report.rendered_files = rendered
    return report
