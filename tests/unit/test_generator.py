"""
Tests for the generation pass.

The transforms are exercised on strings; the file handling is exercised
on throwaway vue-cli projects.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from src.lang_router_plugin.config.schema import PluginConfig, PluginOptions
from src.lang_router_plugin.generator import (
    FileStatus,
    GenerationReport,
    apply_plugin,
    app_transform,
    generate,
    main_transform,
    process_file,
    router_transform,
)
from src.lang_router_plugin.project.framework import ProjectInfo
from src.lang_router_plugin.utils.core.exceptions import PreconditionError, TemplateError
from tests.utils.project_helpers import (
    APP_VUE,
    MAIN_JS,
    ROUTER_JS,
    ROUTER_TS,
    create_vue_project,
    make_manifest,
)


class TestRouterTransform:
    """Test the router file transform."""

    def test_without_templates(self, base_config: PluginConfig, no_options: PluginOptions) -> None:
        """Only the router import, install and construction change."""
        text, warnings = router_transform(base_config, no_options)(ROUTER_JS)

        assert warnings == []
        assert text == (
            ROUTER_JS.replace(
                "import VueRouter from 'vue-router'",
                "import { LangRouter } from 'vue-lang-router'",
            )
            .replace("Vue.use(VueRouter)", "Vue.use(LangRouter)")
            .replace("new VueRouter", "new LangRouter")
        )

    def test_with_templates(self, base_config: PluginConfig, all_options: PluginOptions) -> None:
        """Example translations are imported and passed to the install call."""
        text, warnings = router_transform(base_config, all_options)(ROUTER_JS)

        assert warnings == []
        assert "import { translations, localizedURLs } from '../lang/translations'" in text
        assert "Vue.use(LangRouter, {\n  defaultLanguage: 'en',\n" in text
        assert "new LangRouter({" in text

    def test_typescript(self, base_config: PluginConfig, no_options: PluginOptions) -> None:
        """The RouteConfig type import survives."""
        text, _ = router_transform(base_config, no_options)(ROUTER_TS)

        assert "import { RouteConfig } from 'vue-router'" in text
        assert "import { LangRouter } from 'vue-lang-router'" in text
        assert "VueRouter" not in text

    def test_missing_statements_warn(self, base_config: PluginConfig, no_options: PluginOptions) -> None:
        """Unrecognized router files produce warnings, not errors."""
        text, warnings = router_transform(base_config, no_options)("export default {}\n")

        assert text.startswith("import { LangRouter } from 'vue-lang-router'\n")
        assert len(warnings) == 2
        assert "register LangRouter manually" in warnings[0]
        assert "construct LangRouter manually" in warnings[1]

    def test_idempotent(self, base_config: PluginConfig, all_options: PluginOptions) -> None:
        """A second run leaves the file unchanged and warns about nothing."""
        transform = router_transform(base_config, all_options)
        once, _ = transform(ROUTER_JS)

        twice, warnings = transform(once)

        assert twice == once
        assert warnings == []

    def test_custom_library_name(self, no_options: PluginOptions) -> None:
        """The import uses the configured package name."""
        config = PluginConfig.model_validate({"dependency": {"name": "@acme/lang-router"}})

        text, _ = router_transform(config, no_options)(ROUTER_JS)

        assert "import { LangRouter } from '@acme/lang-router'" in text


class TestMainTransform:
    """Test the entry file transform."""

    def test_wires_i18n(self, base_config: PluginConfig) -> None:
        """i18n is imported and added to the root options."""
        text, warnings = main_transform(base_config)(MAIN_JS)

        assert warnings == []
        assert "import router from './router'\nimport { i18n } from 'vue-lang-router'\n" in text
        assert "new Vue({\n  i18n,\n  router," in text

    def test_replaces_local_i18n_import(self, base_config: PluginConfig) -> None:
        """A standalone i18n import from another module is replaced."""
        source = MAIN_JS.replace(
            "import router from './router'",
            "import router from './router'\nimport i18n from './i18n'",
        )

        text, _ = main_transform(base_config)(source)

        assert "import i18n from './i18n'" not in text
        assert text.count("import { i18n } from 'vue-lang-router'") == 1

    def test_no_root_instance_warns(self, base_config: PluginConfig) -> None:
        """Without new Vue(...) the user is told to finish manually."""
        _, warnings = main_transform(base_config)("import Vue from 'vue'\n")

        assert len(warnings) == 1
        assert "add i18n to the root options manually" in warnings[0]

    def test_idempotent(self, base_config: PluginConfig) -> None:
        """A second run changes nothing."""
        transform = main_transform(base_config)
        once, _ = transform(MAIN_JS)

        assert transform(once)[0] == once


class TestAppTransform:
    """Test the App.vue transform."""

    def test_switcher_and_links(self, all_options: PluginOptions) -> None:
        """Links are rewritten except inside the inserted switcher."""
        text, warnings = app_transform(all_options)(APP_VUE)

        assert warnings == []
        assert '<div id="nav">\n    <language-switcher v-slot="{ links }">' in text
        assert text.count("<router-link") == 1
        assert text.count("<localized-link") == 2
        assert "</localized-link>" in text

    def test_links_only(self) -> None:
        """Without the switcher every link is rewritten."""
        options = PluginOptions(add_language_switcher=False)

        text, _ = app_transform(options)(APP_VUE)

        assert "<language-switcher" not in text
        assert "<router-link" not in text

    def test_switcher_only(self) -> None:
        """Without link rewriting the links stay as they are."""
        options = PluginOptions(rewrite_router_link=False)

        text, _ = app_transform(options)(APP_VUE)

        assert "<language-switcher" in text
        assert text.count("<router-link") == 3

    def test_no_div_warns(self, all_options: PluginOptions) -> None:
        """The switcher cannot be placed without a div."""
        _, warnings = app_transform(all_options)("<template><span/></template>\n")

        assert len(warnings) == 1
        assert "add <language-switcher> manually" in warnings[0]

    def test_idempotent(self, all_options: PluginOptions) -> None:
        """The switcher is inserted once and nothing changes on a rerun."""
        transform = app_transform(all_options)
        once, _ = transform(APP_VUE)

        twice, _ = transform(once)

        assert twice == once
        assert twice.count("<language-switcher") == 1


class TestProcessFile:
    """Test the process_file function."""

    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A missing file is reported, not raised."""
        result = process_file(tmp_path / "nope.js", lambda t: (t, []), "do it manually")

        assert result.status is FileStatus.MISSING
        assert result.warnings == ["do it manually"]
        assert "do it manually" in caplog.text

    def test_unchanged_file_not_written(self, tmp_path: Path) -> None:
        """A transform without effect leaves the file alone."""
        path = tmp_path / "a.js"
        _ = path.write_text("x\n", encoding="utf-8")
        mtime = path.stat().st_mtime_ns

        result = process_file(path, lambda t: (t, []), "")

        assert result.status is FileStatus.UNCHANGED
        assert path.stat().st_mtime_ns == mtime

    def test_modified_file(self, tmp_path: Path) -> None:
        """The transformed text is written back."""
        path = tmp_path / "a.js"
        _ = path.write_text("x\n", encoding="utf-8")

        result = process_file(path, lambda t: (t.upper(), ["note"]), "")

        assert result.status is FileStatus.MODIFIED
        assert result.warnings == ["note"]
        assert path.read_text(encoding="utf-8") == "X\n"


class TestGenerate:
    """Test the generate function."""

    def test_all_files(
        self,
        vue_project: Path,
        base_config: PluginConfig,
        all_options: PluginOptions,
        js_project_info: ProjectInfo,
    ) -> None:
        """Router, entry file and App.vue are rewritten."""
        report = generate(vue_project, all_options, js_project_info, base_config)

        assert len(report.modified) == 3
        assert report.missing == []
        router = (vue_project / "src" / "router" / "index.js").read_text(encoding="utf-8")
        assert "new LangRouter({" in router

    def test_app_skipped_when_disabled(
        self,
        vue_project: Path,
        base_config: PluginConfig,
        no_options: PluginOptions,
        js_project_info: ProjectInfo,
    ) -> None:
        """App.vue is not touched when no markup option is enabled."""
        report = generate(vue_project, no_options, js_project_info, base_config)

        assert report.status_of(vue_project / "src" / "App.vue") is None
        assert (vue_project / "src" / "App.vue").read_text(encoding="utf-8") == APP_VUE

    def test_partial_failure(
        self,
        tmp_path: Path,
        base_config: PluginConfig,
        all_options: PluginOptions,
        js_project_info: ProjectInfo,
    ) -> None:
        """A missing entry file does not stop the other files."""
        project = create_vue_project(tmp_path, main=None)

        report = generate(project, all_options, js_project_info, base_config)

        assert report.missing == [project / "src" / "main.js"]
        assert report.status_of(project / "src" / "router" / "index.js") is FileStatus.MODIFIED
        assert report.status_of(project / "src" / "App.vue") is FileStatus.MODIFIED
        assert any("import i18n manually" in w for w in report.warnings)

    def test_typescript_files(
        self, ts_vue_project: Path, base_config: PluginConfig, no_options: PluginOptions
    ) -> None:
        """TypeScript projects are processed through their .ts files."""
        info = ProjectInfo(vue_version=2, typescript=True, has_router=True)

        report = generate(ts_vue_project, no_options, info, base_config)

        assert report.modified == [
            ts_vue_project / "src" / "router" / "index.ts",
            ts_vue_project / "src" / "main.ts",
        ]
        assert report.missing == []
        router = (ts_vue_project / "src" / "router" / "index.ts").read_text(encoding="utf-8")
        assert "import { RouteConfig } from 'vue-router'" in router


    def test_undecodable_file_does_not_stop_the_pass(
        self,
        vue_project: Path,
        base_config: PluginConfig,
        all_options: PluginOptions,
        js_project_info: ProjectInfo,
    ) -> None:
        """A router file that is not UTF-8 is reported and the others still run."""
        router = vue_project / "src" / "router" / "index.js"
        _ = router.write_bytes(b"import Vue from 'vue'\n\xff\xfe\n")

        report = generate(vue_project, all_options, js_project_info, base_config)

        assert report.missing == [router]
        assert router.read_bytes() == b"import Vue from 'vue'\n\xff\xfe\n"
        assert report.status_of(vue_project / "src" / "main.js") is FileStatus.MODIFIED
        main_js = (vue_project / "src" / "main.js").read_text(encoding="utf-8")
        assert "import { i18n } from 'vue-lang-router'" in main_js
    def test_rerun_is_noop(
        self,
        vue_project: Path,
        base_config: PluginConfig,
        all_options: PluginOptions,
        js_project_info: ProjectInfo,
    ) -> None:
        """Running the pass again leaves every file unchanged."""
        _ = generate(vue_project, all_options, js_project_info, base_config)

        report = generate(vue_project, all_options, js_project_info, base_config)

        assert report.modified == []
        assert all(r.status is FileStatus.UNCHANGED for r in report.files)


class TestApplyPlugin:
    """Test the apply_plugin function."""

    def test_full_pass(
        self, vue_project: Path, base_config: PluginConfig, all_options: PluginOptions
    ) -> None:
        """Dependency, example files and sources are all handled."""
        report = apply_plugin(vue_project, all_options, base_config)

        assert report.dependency_added
        manifest = json.loads((vue_project / "package.json").read_text(encoding="utf-8"))
        assert manifest["dependencies"]["vue-lang-router"] == base_config.dependency.specifier
        assert (vue_project / "src" / "lang" / "translations" / "index.js").exists()
        assert len(report.rendered_files) == 3
        assert "3 modified" in str(report)


    def test_template_failure_skips_translation_import(
        self, vue_project: Path, base_config: PluginConfig, all_options: PluginOptions
    ) -> None:
        """Without rendered example files the router does not import them."""
        with patch(
            "src.lang_router_plugin.generator.render_templates",
            side_effect=TemplateError("Template directory not found"),
        ):
            report = apply_plugin(vue_project, all_options, base_config)

        router = (vue_project / "src" / "router" / "index.js").read_text(encoding="utf-8")
        assert "../lang/translations" not in router
        assert "Vue.use(LangRouter)" in router
        assert report.rendered_files == []
        assert not (vue_project / "src" / "lang").exists()
    def test_precondition_failure_touches_nothing(
        self, tmp_path: Path, base_config: PluginConfig, all_options: PluginOptions
    ) -> None:
        """A project without the router is rejected before any write."""
        project = create_vue_project(tmp_path, manifest=make_manifest(router=False))
        manifest_before = (project / "package.json").read_text(encoding="utf-8")

        with pytest.raises(PreconditionError):
            _ = apply_plugin(project, all_options, base_config)

        assert (project / "package.json").read_text(encoding="utf-8") == manifest_before
        assert (project / "src" / "router" / "index.js").read_text(encoding="utf-8") == ROUTER_JS
        assert not (project / "src" / "lang").exists()

    def test_vue3_rejected(
        self, tmp_path: Path, base_config: PluginConfig, all_options: PluginOptions
    ) -> None:
        """Vue 3 projects are rejected."""
        project = create_vue_project(tmp_path, manifest=make_manifest(vue="^3.0.0"))

        with pytest.raises(PreconditionError, match="Unsupported Vue major version"):
            _ = apply_plugin(project, all_options, base_config)


class TestGenerationReport:
    """Test the GenerationReport class."""

    def test_empty_report(self) -> None:
        """An empty report summarizes to zeros."""
        assert str(GenerationReport()) == (
            "Generation Results: 0 modified, 0 missing, 0 rendered, 0 warnings"
        )
