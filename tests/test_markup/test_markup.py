"""Tests for the markup parser and serializer."""

import logging

import pytest

from chatstyle.config import Settings
from chatstyle.errors import MarkupError
from chatstyle.markup import (
    MarkupParser,
    MarkupSerializer,
    parse_inline_style,
    parse_markup,
    serialize_markup,
    tokenize,
)
from chatstyle.model import Element, Props, Severity, Text


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


class TestTokenize:
    def test_tags_and_text(self):
        assert tokenize("<p>Hello</p>") == ["<p>", "Hello", "</p>"]

    def test_whitespace_between_tags_is_dropped(self):
        assert tokenize("<div>\n  <p>x</p>\n</div>") == ["<div>", "<p>", "x", "</p>", "</div>"]

    def test_text_is_trimmed(self):
        assert tokenize("<b>  bold  </b>") == ["<b>", "bold", "</b>"]


class TestParseInlineStyle:
    def test_declarations(self):
        assert parse_inline_style("color: red; margin: 0") == {"color": "red", "margin": "0"}

    def test_empty_halves_are_dropped(self):
        assert parse_inline_style("color:; : 1px; ;padding: 2px;") == {"padding": "2px"}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParse:
    def test_single_element(self):
        nodes = parse_markup('<p class="note">Hello</p>')
        assert len(nodes) == 1
        p = nodes[0]
        assert isinstance(p, Element)
        assert p.tag == "p"
        assert p.props.classes == ["note"]
        assert p.children == [Text(content="Hello", index=1)]

    def test_nested_elements_and_sibling_indexes(self):
        nodes = parse_markup("<div><h3>Title</h3><p>Body</p></div>")
        div = nodes[0]
        assert [c.tag for c in div.elements()] == ["h3", "p"]
        assert [c.index for c in div.children] == [1, 2]
        assert div.text() == "TitleBody"

    def test_attributes(self):
        nodes = parse_markup(
            '<td id="cell" class="a b" style="color: red; padding: 8px" colspan="2">x</td>'
        )
        props = nodes[0].props
        assert props.id == "cell"
        assert props.classes == ["a", "b"]
        assert props.inline_style == {"color": "red", "padding": "8px"}
        assert props.attrs == {"colspan": "2"}
        assert props.style == {}

    def test_single_quoted_attribute(self):
        nodes = parse_markup("<span class='tag'>x</span>")
        assert nodes[0].props.classes == ["tag"]

    def test_top_level_text_and_elements(self):
        nodes = parse_markup("Hi <b>there</b> friend")
        assert isinstance(nodes[0], Text)
        assert nodes[1].tag == "b"
        assert nodes[2] == Text(content="friend", index=3)

    def test_empty_markup(self):
        assert parse_markup("") == []

    def test_to_dict_shape(self):
        node = parse_markup('<p id="x" data-k="v">Hi</p>')[0]
        assert node.to_dict() == {
            "element": "p",
            "props": {"style": {}, "class": [], "id": "x", "inlineStyle": {}, "data-k": "v"},
            "children": [{"element": "text", "children": [{"innerText": "Hi"}], "childIndex": 1}],
            "childIndex": 1,
        }


class TestMalformedMarkup:
    def test_unbalanced_tags_report_and_keep_partial_tree(self):
        parsed = MarkupParser().parse_document("<div><span></div>")
        assert not parsed.well_formed
        assert [d.rule for d in parsed.diagnostics] == ["unclosed_tags"]
        div = parsed.nodes[0]
        assert div.tag == "div"
        assert div.elements()[0].tag == "span"

    def test_unbalanced_tags_are_logged_as_error(self, caplog):
        with caplog.at_level(logging.ERROR, logger="chatstyle"):
            parse_markup("<div><span></div>")
        assert any("Unclosed HTML tags" in r.getMessage() for r in caplog.records)

    def test_closing_tag_with_trailing_space(self):
        parsed = MarkupParser().parse_document("<div><p>x</p ></div >")
        assert parsed.diagnostics == []
        assert serialize_markup(parsed.nodes) == "<div><p>x</p></div>"

    def test_stray_closing_tag_is_ignored(self):
        parsed = MarkupParser().parse_document("</p>hello")
        assert parsed.diagnostics[0].rule == "unmatched_close"
        assert parsed.nodes == [Text(content="hello", index=1)]

    def test_stray_bracket_is_a_warning(self):
        parsed = MarkupParser().parse_document("<p>a < b</p>")
        assert [d.rule for d in parsed.diagnostics] == ["stray_brackets"]
        assert parsed.diagnostics[0].severity is Severity.WARNING
        assert parsed.well_formed

    def test_raise_for_errors(self):
        parsed = MarkupParser().parse_document("<div>")
        with pytest.raises(MarkupError, match="unclosed_tags"):
            parsed.raise_for_errors()

    def test_non_string_input(self):
        parsed = MarkupParser().parse_document(None)
        assert parsed.nodes == []
        assert parsed.diagnostics[0].rule == "invalid_argument"

    def test_verbose_parse_logs_tree(self, caplog):
        parser = MarkupParser(Settings(verbose=True))
        with caplog.at_level(logging.DEBUG, logger="chatstyle"):
            parser.parse("<p>x</p>")
        assert any('"element": "p"' in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_text_is_verbatim(self):
        assert serialize_markup([Text(content="a &amp; b")]) == "a &amp; b"

    def test_element_without_attributes(self):
        assert serialize_markup([Element(tag="p", children=[Text(content="x")])]) == "<p>x</p>"

    def test_attribute_order(self):
        node = Element(
            tag="a",
            props=Props(
                style={"color": "red"},
                classes=["link", "big"],
                id="home",
                attrs={"href": "/"},
            ),
            children=[Text(content="Home")],
        )
        assert (
            serialize_markup([node])
            == '<a style="color: red;" class="link big" id="home" href="/">Home</a>'
        )

    def test_inline_style_overrides_computed(self):
        node = Element(
            tag="p",
            props=Props(style={"color": "red", "margin": "0"}, inline_style={"color": "green"}),
        )
        assert serialize_markup([node]) == '<p style="color: green; margin: 0;"></p>'

    def test_camel_case_keys_become_kebab(self):
        node = Element(tag="div", props=Props(style={"backgroundColor": "#fff"}))
        assert serialize_markup([node]) == '<div style="background-color: #fff;"></div>'

    def test_quotes_are_escaped(self):
        node = Element(tag="p", props=Props(style={"font-family": '"Courier New"'}))
        assert serialize_markup([node]) == '<p style="font-family: &quot;Courier New&quot;;"></p>'

    def test_empty_attrs_are_skipped(self):
        node = Element(tag="p", props=Props(attrs={"title": ""}))
        assert MarkupSerializer().serialize([node]) == "<p></p>"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "markup",
        [
            '<p class="note">Hello</p>',
            '<span id="x">Hi</span>',
            '<td colspan="2">cell</td>',
        ],
    )
    def test_single_element(self, markup):
        assert serialize_markup(parse_markup(markup)) == markup

    def test_nested(self):
        markup = '<div class="card"><h3>Title</h3><p>Body</p></div>'
        assert serialize_markup(parse_markup(markup)) == markup

    def test_inline_style_is_normalized(self):
        assert serialize_markup(parse_markup('<p style="color:red">x</p>')) == '<p style="color: red;">x</p>'
