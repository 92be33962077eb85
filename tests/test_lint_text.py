"""
End-to-end checks of JavaScript/TypeScript sources through lint_text.
"""

from pathlib import Path

import pytest

from spacelint.config import Config, RuleCfg
from spacelint.engine import build_rules, lint_text
from spacelint.report_schema import DiagnosticModel
from tests.infrastructure import lint_js, lint_ts


def msgs(diags):
    return [d.message for d in diags]


class TestNever:

    def test_member_with_spaces(self):
        diags = lint_js("obj[ key ];")
        assert msgs(diags) == [
            "There should be no space after '['",
            "There should be no space before ']'",
        ]
        assert [(d.line, d.column) for d in diags] == [(1, 3), (1, 9)]

    def test_clean(self):
        assert lint_js("obj[key]; const o = { [k]: obj[k] };") == []

    def test_property_key(self):
        assert msgs(lint_js("const o = { [ k ]: 1 };")) == [
            "There should be no space after '['",
            "There should be no space before ']'",
        ]

    def test_method_and_destructuring(self):
        code = "const o = { [ a]() {} };\nconst { [b ]: v } = o;\n"
        diags = lint_js(code)
        assert [(d.line, d.message) for d in diags] == [
            (1, "There should be no space after '['"),
            (2, "There should be no space before ']'"),
        ]

    def test_dot_access_and_literal_keys_ignored(self):
        assert lint_js("a . b; const o = { 'x' : 1, y : 2 };") == []

    def test_multiline_not_checked(self):
        assert lint_js("obj[\n  key\n];") == []

    def test_nested_sorted_by_position(self):
        diags = lint_js("a[ b[ c ] ];")
        assert [d.column for d in diags] == [1, 4, 8, 10]

    def test_comment_counts_as_gap(self):
        assert msgs(lint_js("obj[/* c */key];")) == ["There should be no space after '['"]


class TestParenthesizedInner:

    def test_spaces_outside_parens_ignored(self):
        assert lint_js("obj[ (a) ];") == []
        assert lint_js("o = { [ (a) ]: 1 };") == []

    def test_space_inside_parens_reported(self):
        diags = lint_js("obj[( a)];")
        assert msgs(diags) == ["There should be no space after '('"]
        assert (diags[0].line, diags[0].column) == (1, 4)

    def test_always_requires_space_inside_parens(self):
        assert msgs(lint_js("obj[ (a) ];", "always")) == [
            "A space is required after '('",
            "A space is required before ')'",
        ]

    def test_even_measures_inside_parens(self):
        assert lint_js("obj[(a)  ];", "even") == []
        assert msgs(lint_js("obj[(a )];", "even")) == ['Expected 1 or 0 spaces around "[" and "]"']


class TestAlways:

    def test_missing_spaces(self):
        assert msgs(lint_js("obj[key];", "always")) == [
            "A space is required after '['",
            "A space is required before ']'",
        ]

    def test_spaced(self):
        assert lint_js("obj[ key ]; const o = { [ k ]: 1 };", "always") == []


class TestEven:

    @pytest.mark.parametrize("code", [
        "obj[key];",
        "obj[ key ];",
        "const o = { [ k ]: 1, [j]: 2 };",
    ])
    def test_accepted(self, code):
        assert lint_js(code, "even") == []

    def test_uneven(self):
        diags = lint_js("x = obj[  key ];", "even")
        assert msgs(diags) == ['Expected 1 or 0 spaces around "[" and "]"']
        # reported at the member expression start
        assert (diags[0].line, diags[0].column) == (1, 4)

    def test_too_wide(self):
        assert msgs(lint_js("obj[  key  ];", "even")) == ['Expected 1 or 0 spaces around "[" and "]"']

    def test_different_lines(self):
        diags = lint_js("obj[\n  key ];", "even")
        assert msgs(diags) == ['Expected "[" and "]" to be on the same line']

    def test_multibyte_inner_uses_character_columns(self):
        assert lint_js("obj[ 'ééé' ];", "even") == []

    def test_typescript(self):
        assert msgs(lint_ts("const v: string = m[ k];", "even")) == [
            'Expected 1 or 0 spaces around "[" and "]"'
        ]


class TestEngine:

    def test_path_attached(self):
        rules = build_rules(Config())
        (d,) = lint_text("a[ b];", ext=".js", rules=rules, path=Path("src/a.js"))
        assert d.path == Path("src/a.js")
        assert DiagnosticModel.from_diagnostic(d).format() == "src/a.js:1:2: [computed-property-even-spacing] There should be no space after '['"

    def test_disabled_rule(self):
        cfg = Config(rules={"computed-property-even-spacing": RuleCfg(enabled=False)})
        assert build_rules(cfg) == []

    def test_override_wins(self):
        cfg = Config(rules={"computed-property-even-spacing": RuleCfg(enabled=False, options=["never"])})
        (rule,) = build_rules(cfg, {"computed-property-even-spacing": "always"})
        assert rule.options == ("always",)
        assert rule.id == "computed-property-even-spacing"

    def test_syntax_errors_still_checked(self, caplog):
        diags = lint_text("obj[ key ];\nfunction (", ext=".js", rules=build_rules(Config()))
        assert "There should be no space after '['" in msgs(diags)
        assert any("syntax errors" in r.getMessage() for r in caplog.records)
