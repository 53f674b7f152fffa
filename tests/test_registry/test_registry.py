"""Tests for the template and theme registries."""

import logging

import pytest

from chatstyle.errors import RegistryError, TemplateNotFound, ThemeNotFound
from chatstyle.registry import (
    DEFAULT_TEMPLATES,
    TemplateRegistry,
    ThemeRegistry,
    build_table_rows,
    _Registry,
)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplateRegistry:
    def test_builtin_names(self):
        assert TemplateRegistry().names() == ["default", "chatAlert"]

    def test_get_known(self):
        assert TemplateRegistry().get("chatAlert") == DEFAULT_TEMPLATES["chatAlert"]

    def test_unknown_falls_back_to_default(self):
        assert TemplateRegistry().get("missing") == DEFAULT_TEMPLATES["default"]

    def test_add_and_replace(self):
        registry = TemplateRegistry()
        registry.add({"note": "<p>{{text}}</p>"})
        registry.add({"note": "<em>{{text}}</em>"})
        assert registry.get("note") == "<em>{{text}}</em>"
        assert "note" in registry

    def test_add_skips_invalid_entries(self, caplog):
        registry = TemplateRegistry()
        with caplog.at_level(logging.ERROR, logger="chatstyle"):
            registry.add({"bad": 42, "good": "<p></p>"})
        assert "bad" not in registry
        assert "good" in registry
        assert any("Invalid template 'bad'" in r.getMessage() for r in caplog.records)

    def test_add_rejects_non_mapping(self, caplog):
        registry = TemplateRegistry()
        with caplog.at_level(logging.ERROR, logger="chatstyle"):
            registry.add(["not", "a", "map"])
        assert registry.names() == ["default", "chatAlert"]
        assert any("Invalid template map" in r.getMessage() for r in caplog.records)

    def test_remove(self):
        registry = TemplateRegistry()
        registry.remove("chatAlert")
        registry.remove("never-there")
        assert registry.names() == ["default"]

    def test_set_replaces_everything(self):
        registry = TemplateRegistry()
        registry.set({"only": "<p></p>"})
        assert registry.names() == ["only"]

    def test_missing_default_raises(self):
        registry = TemplateRegistry()
        registry.set({})
        with pytest.raises(TemplateNotFound) as excinfo:
            registry.get("x")
        assert str(excinfo.value) == "Template not found: 'x'"
        assert isinstance(excinfo.value, KeyError)

    def test_init_restores_builtins(self):
        registry = TemplateRegistry()
        registry.set({})
        registry.init()
        assert "default" in registry


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


class TestThemeRegistry:
    def test_default_theme_is_empty(self):
        assert ThemeRegistry().get("default") == ""

    def test_chat_alert_uses_palette(self):
        sheet = ThemeRegistry().get("chatAlert", {"bg_color": "#000", "title_color": "#fff"})
        assert "--alert-bg: #000;" in sheet
        assert "--alert-title-color: #fff;" in sheet

    def test_chat_alert_palette_defaults(self):
        sheet = ThemeRegistry().get("chatAlert")
        assert "--alert-bg: #b8defd;" in sheet

    def test_output_is_single_line(self):
        sheet = ThemeRegistry().get("chatAlert", {})
        assert "\n" not in sheet
        assert "  " not in sheet

    def test_custom_theme(self):
        registry = ThemeRegistry()
        registry.add({"mono": lambda palette: "p {\n  font-family: 'Courier  New';\n}"})
        assert registry.get("mono") == "p { font-family: 'Courier  New'; }"

    def test_non_callable_theme_is_skipped(self):
        registry = ThemeRegistry()
        registry.add({"bad": "p { color: red; }"})
        assert "bad" not in registry

    def test_missing_default_raises(self):
        registry = ThemeRegistry()
        registry.set({})
        with pytest.raises(ThemeNotFound):
            registry.get("x")
        with pytest.raises(RegistryError):
            registry.get("x")


class TestRegistryBase:
    def test_base_registry_is_abstract(self):
        with pytest.raises(TypeError):
            _Registry({})

    def test_subclass_must_define_accepts(self):
        class Loose(_Registry[str]):
            pass

        with pytest.raises(TypeError):
            Loose({"default": "x"})


class TestTableRows:
    def test_rows_in_order(self):
        rows = build_table_rows({"a": 1, "b": "two"})
        assert rows.count("<tr>") == 2
        assert rows.index(">a</td>") < rows.index(">b</td>")

    def test_cells_are_escaped(self):
        assert "&lt;b&gt;" in build_table_rows({"k": "<b>"})

    def test_empty(self):
        assert build_table_rows({}) == ""
