"""
Tests for token rendering.
"""

from conftest import brace, num, op
from rpn_calc.renderer import DEFAULT_STYLES, render, render_rich, token_style


class TestRender:

    def test_postfix_form(self):
        assert render([num(3), num(4), num(2), op("*"), op("+")]) == "3 4 2 * +"

    def test_braces(self):
        assert render([brace("("), num(1), brace(")")]) == "( 1 )"

    def test_empty(self):
        assert render([]) == ""


class TestRenderRich:

    def test_plain_text_matches_render(self):
        tokens = [num(10), num(2), op("-"), num(3), op("*")]
        assert render_rich(tokens).plain == render(tokens)

    def test_default_styles_per_kind(self):
        text = render_rich([num(1), brace("("), op("+")])
        assert [span.style for span in text.spans] == ["green", "cyan", "yellow"]

    def test_custom_styles(self):
        styles = {"number": "bold blue", "brace": "red", "operator": "magenta"}
        text = render_rich([num(12), op("/")], styles)
        assert text.spans[0].style == "bold blue"
        assert (text.spans[0].start, text.spans[0].end) == (0, 2)
        assert text.spans[1].style == "magenta"

    def test_token_style_lookup(self):
        assert token_style(num(1), DEFAULT_STYLES) == "green"
        assert token_style(op("-"), {}) == ""
