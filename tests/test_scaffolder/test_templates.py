"""Tests for template lookup and placeholder substitution.

Covers:
- TemplateCatalog kinds, order and missing-template detection
- Single-pass, total substitution of the five placeholder tokens
- Rendering of the bundled templates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from newclass.config import DEFAULT_TEMPLATES_DIR
from newclass.errors import TemplateRenderError
from newclass.scaffolder.templates import (
    PLACEHOLDERS,
    TemplateCatalog,
    TemplateDescriptor,
    TemplateKind,
    TemplateRenderer,
    placeholder_values,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TestTemplateCatalog:
    def test_kind_order(self):
        assert [kind.value for kind in TemplateKind] == ["TestTrait", "Test", "Interface", "Class"]

    def test_descriptors_follow_kind_order(self):
        catalog = TemplateCatalog()
        assert [d.kind for d in catalog.descriptors()] == list(TemplateKind)

    def test_descriptor_path(self):
        catalog = TemplateCatalog()
        descriptor = catalog.descriptor(TemplateKind.TEST_TRAIT)
        assert descriptor.source_path == DEFAULT_TEMPLATES_DIR.resolve() / "TestTrait.php"

    def test_bundled_templates_are_complete(self):
        assert TemplateCatalog().missing() == []

    def test_missing_templates(self, tmp_path: Path):
        (tmp_path / "Class.php").write_text("<?php\n", encoding="utf-8")
        catalog = TemplateCatalog(tmp_path)
        assert [d.kind for d in catalog.missing()] == [
            TemplateKind.TEST_TRAIT,
            TemplateKind.TEST,
            TemplateKind.INTERFACE,
        ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_placeholder_set(self):
        assert set(PLACEHOLDERS) == {
            "__BASE_TEST_NAME__",
            "__ROOT_NAMESPACE__",
            "__TARGET_CLASS_NAME__",
            "__SUB_NAMESPACE__",
            "__LC_TARGET_CLASS_NAME__",
        }

    def test_placeholder_values(self, widget_args):
        assert placeholder_values(widget_args) == {
            "__BASE_TEST_NAME__": "AppTest",
            "__ROOT_NAMESPACE__": "App",
            "__TARGET_CLASS_NAME__": "Widget",
            "__SUB_NAMESPACE__": "Sub\\Ns",
            "__LC_TARGET_CLASS_NAME__": "widget",
        }

    def test_every_token_once(self, widget_args):
        template = (
            "base=__BASE_TEST_NAME__ root=__ROOT_NAMESPACE__ "
            "name=__TARGET_CLASS_NAME__ sub=__SUB_NAMESPACE__ "
            "lc=__LC_TARGET_CLASS_NAME__"
        )
        rendered = TemplateRenderer().render(template, widget_args)
        assert rendered == (
            "base=AppTest root=App name=Widget sub=Sub\\Ns lc=widget"
        )
        for token in PLACEHOLDERS:
            assert token not in rendered

    def test_all_occurrences_replaced(self, widget_args):
        rendered = TemplateRenderer().render(
            "__TARGET_CLASS_NAME__ __TARGET_CLASS_NAME__TestTrait set__TARGET_CLASS_NAME__",
            widget_args,
        )
        assert rendered == "Widget WidgetTestTrait setWidget"

    def test_adjacent_tokens(self, widget_args):
        rendered = TemplateRenderer().render(
            "$__LC_TARGET_CLASS_NAME__TestInstance", widget_args
        )
        assert rendered == "$widgetTestInstance"

    def test_template_without_tokens_is_unchanged(self, widget_args):
        assert TemplateRenderer().render("<?php\n\n// nothing\n", widget_args) == (
            "<?php\n\n// nothing\n"
        )

    def test_values_are_not_expanded_again(self, widget_args):
        args = widget_args.model_copy(update={"name": "__ROOT_NAMESPACE__"})
        rendered = TemplateRenderer().render("__TARGET_CLASS_NAME__", args)
        assert rendered == "__ROOT_NAMESPACE__"


class TestRenderTemplate:
    def test_reads_and_renders(self, tmp_path: Path, widget_args):
        source = tmp_path / "Class.php"
        source.write_text("class __TARGET_CLASS_NAME__ {}\n", encoding="utf-8")
        descriptor = TemplateDescriptor(TemplateKind.CLASS, source)
        assert TemplateRenderer().render_template(descriptor, widget_args) == "class Widget {}\n"

    def test_missing_source_raises(self, tmp_path: Path, widget_args):
        descriptor = TemplateDescriptor(TemplateKind.CLASS, tmp_path / "Class.php")
        with pytest.raises(TemplateRenderError) as excinfo:
            TemplateRenderer().render_template(descriptor, widget_args)
        assert excinfo.value.template_path == tmp_path / "Class.php"

    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_bundled_templates_render_completely(self, kind, widget_args):
        descriptor = TemplateCatalog().descriptor(kind)
        rendered = TemplateRenderer().render_template(descriptor, widget_args)
        for token in PLACEHOLDERS:
            assert token not in rendered
        assert "Widget" in rendered
        assert "App\\" in rendered
