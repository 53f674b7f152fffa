"""Tests for the stylesheet parser."""

import logging

import pytest

from chatstyle.errors import StylesheetError
from chatstyle.model import ElementRule, FunctionEntry, StyleBlock
from chatstyle.stylesheet import StylesheetParser, parse_declarations, parse_stylesheet


# ---------------------------------------------------------------------------
# Selector categories
# ---------------------------------------------------------------------------


class TestUniversalSelector:
    def test_parse_universal(self):
        rules = parse_stylesheet("* { margin: 0; }")
        assert rules.universal == {"margin": "0"}

    def test_repeated_universal_merges(self):
        rules = parse_stylesheet("* { margin: 0; } * { padding: 1px; margin: 2px; }")
        assert rules.universal == {"margin": "2px", "padding": "1px"}


class TestClassAndIdSelectors:
    def test_universal_and_class(self):
        rules = parse_stylesheet("* { margin: 0; } .card { padding: 1px; }")
        assert rules.universal == {"margin": "0"}
        assert rules.classes[".card"].styles == {"padding": "1px"}

    def test_id(self):
        rules = parse_stylesheet("#footer { font-size: 0.8em; }")
        assert rules.ids == {"#footer": StyleBlock(styles={"font-size": "0.8em"})}

    def test_repeated_class_replaces_earlier(self):
        rules = parse_stylesheet(".a { color: red; margin: 0; } .a { color: blue; }")
        assert rules.classes[".a"].styles == {"color": "blue"}


class TestElementSelector:
    def test_element(self):
        rules = parse_stylesheet("h3 { color: navy; }")
        assert rules.elements["h3"] == ElementRule(styles={"color": "navy"})

    def test_element_children_are_never_filled(self):
        rules = parse_stylesheet("div p { color: red; }")
        assert "div p" in rules.elements
        assert rules.elements["div p"].children == {}


class TestFunctionSelector:
    def test_root_variables(self):
        rules = parse_stylesheet(":root { --accent: #2516f5; --bg: white; }")
        assert rules.functions[":root"] == [
            FunctionEntry(target=None, args=[], styles={"--accent": "#2516f5", "--bg": "white"})
        ]
        assert rules.variables() == {"--accent": "#2516f5", "--bg": "white"}

    def test_multiple_root_blocks_append(self):
        rules = parse_stylesheet(":root { --a: 1; } :root { --a: 2; --b: 3; }")
        assert len(rules.functions[":root"]) == 2
        assert rules.variables() == {"--a": "2", "--b": "3"}


# ---------------------------------------------------------------------------
# Syntax details
# ---------------------------------------------------------------------------


class TestSyntax:
    def test_selector_list_fans_out(self):
        rules = parse_stylesheet("h3, p, .x { margin: 0; }")
        assert rules.elements["h3"].styles == {"margin": "0"}
        assert rules.elements["p"].styles == {"margin": "0"}
        assert rules.classes[".x"].styles == {"margin": "0"}

    def test_fanned_out_styles_are_independent(self):
        rules = parse_stylesheet("h3, p { margin: 0; }")
        rules.elements["h3"].styles["margin"] = "1px"
        assert rules.elements["p"].styles == {"margin": "0"}

    def test_comments_are_stripped(self):
        rules = parse_stylesheet("/* header */ p { /* inner */ color: red; }")
        assert rules.elements["p"].styles == {"color": "red"}

    def test_multiline_source(self):
        source = """
        .alert {
            border: 1px solid black;
            padding: 5px 10px;
        }
        """
        rules = parse_stylesheet(source)
        assert rules.classes[".alert"].styles == {
            "border": "1px solid black",
            "padding": "5px 10px",
        }

    def test_declaration_without_semicolon_is_dropped(self):
        assert parse_declarations("color: red; margin: 0") == {"color": "red"}

    def test_empty_source(self):
        rules = parse_stylesheet("")
        assert rules.to_dict() == {
            "universal": {},
            "elements": {},
            "classes": {},
            "ids": {},
            "functions": {},
        }


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class TestDiagnostics:
    def test_clean_source_has_no_diagnostics(self):
        parsed = StylesheetParser().parse_document("p { color: red; }")
        assert parsed.diagnostics == []

    def test_unclosed_block_is_reported(self):
        parsed = StylesheetParser().parse_document("p { color: red; } .x { margin: 0;")
        assert parsed.rules.elements["p"].styles == {"color": "red"}
        assert [d.rule for d in parsed.diagnostics] == ["unparsed_text"]

    def test_unparsed_text_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="chatstyle"):
            parse_stylesheet("garbage")
        assert any("Unparsed stylesheet text" in r.getMessage() for r in caplog.records)

    def test_raise_for_errors(self):
        parsed = StylesheetParser().parse_document("p { color: red;")
        with pytest.raises(StylesheetError):
            parsed.raise_for_errors()

    def test_non_string_input(self):
        parsed = StylesheetParser().parse_document(None)
        assert parsed.rules.universal == {}
        assert parsed.diagnostics[0].rule == "invalid_argument"
