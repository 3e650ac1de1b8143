"""
Global test configuration fixtures for lang router plugin tests.

Provides configuration objects and throwaway vue-cli projects on disk.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.lang_router_plugin.config.schema import PluginConfig, PluginOptions
from src.lang_router_plugin.project.framework import ProjectInfo
from tests.utils.project_helpers import create_vue_project


@pytest.fixture
def base_config() -> PluginConfig:
    """Default plugin configuration."""
    return PluginConfig()


@pytest.fixture
def all_options() -> PluginOptions:
    """Every optional step enabled."""
    return PluginOptions()


@pytest.fixture
def no_options() -> PluginOptions:
    """Every optional step disabled."""
    return PluginOptions(
        render_template=False,
        rewrite_router_link=False,
        add_language_switcher=False,
    )


@pytest.fixture
def js_project_info() -> ProjectInfo:
    """A JavaScript Vue 2 project with the router installed."""
    return ProjectInfo(vue_version=2, typescript=False, has_router=True)


@pytest.fixture
def vue_project(tmp_path: Path) -> Path:
    """A JavaScript vue-cli project on disk."""
    return create_vue_project(tmp_path / "demo")


@pytest.fixture
def ts_vue_project(tmp_path: Path) -> Path:
    """A TypeScript vue-cli project on disk."""
    return create_vue_project(tmp_path / "demo-ts", typescript=True)
