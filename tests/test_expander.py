"""
Tests for brace expansion of extended glob patterns.
"""

import pytest

from pollwatch.patterns import Alternatives, Literal, expand, tokenize
from pollwatch.types.errors import BraceExpansionError, ErrorCode, PatternError


class TestExpand:
    """Tests for expand()."""

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("base case", {"base case"}),
            ("escaped \\{ is OK", {"escaped \\{ is OK"}),
            ("commas, are OK", {"commas, are OK"}),
            ("{no reason for expansion}", {"no reason for expansion"}),
            ("{no reason for \\{\\} expansion}", {"no reason for \\{\\} expansion"}),
            ("{a,b}", {"a", "b"}),
            ("{apple,banana,carrot}", {"apple", "banana", "carrot"}),
            ("config.{yml,yaml}", {"config.yml", "config.yaml"}),
            ("{apple,pumpkin,strawberry} pie", {"apple pie", "pumpkin pie", "strawberry pie"}),
            ("{a,b,c}{1,2}", {"a1", "a2", "b1", "b2", "c1", "c2"}),
            ("{a,b}{1,2}{!,?}", {"a1!", "a2!", "b1!", "b2!", "a1?", "a2?", "b1?", "b2?"}),
            ("a{b,{c,d}}", {"ab", "ac", "ad"}),
            ("{aa{bb,cc,dd{e,f}},why even}.", {"why even.", "aabb.", "aacc.", "aadde.", "aaddf."}),
        ],
    )
    def test_expands_into_basic_patterns(self, pattern, expected):
        assert expand(pattern) == expected

    @pytest.mark.parametrize("pattern", ["src/**/*.py", "*.txt", "[ab]?.md", ""])
    def test_pattern_without_braces_is_singleton(self, pattern):
        assert expand(pattern) == {pattern}

    def test_duplicates_collapse(self):
        assert expand("{a,a,b}") == {"a", "b"}

    def test_empty_alternative(self):
        assert expand("file{,.bak}") == {"file", "file.bak"}

    def test_escaped_comma_inside_group_is_literal(self):
        assert expand("{a\\,b,c}") == {"a\\,b", "c"}

    def test_glob_metacharacters_pass_through(self):
        assert expand("src/**/*.{py,pyi}") == {"src/**/*.py", "src/**/*.pyi"}


class TestMalformedBraces:
    """Unbalanced braces are rejected with a typed error."""

    def test_unmatched_close(self):
        with pytest.raises(BraceExpansionError) as exc_info:
            expand("a}b")
        assert exc_info.value.position == 1
        assert exc_info.value.pattern == "a}b"

    def test_unmatched_close_after_group(self):
        with pytest.raises(BraceExpansionError):
            expand("{a,b}}")

    def test_unclosed_open(self):
        with pytest.raises(BraceExpansionError) as exc_info:
            expand("x{a,b")
        assert exc_info.value.position == 1

    def test_unclosed_nested(self):
        with pytest.raises(BraceExpansionError):
            expand("{a,{b,c}")

    def test_is_pattern_error(self):
        with pytest.raises(PatternError) as exc_info:
            expand("}")
        assert exc_info.value.code == ErrorCode.INVALID_PATTERN


class TestTokenize:
    """Tests for the token stream."""

    def test_literals_and_groups(self):
        tokens = tokenize("a{b,c}")
        assert tokens[0] == Literal("a")
        assert isinstance(tokens[1], Alternatives)
        assert set(tokens[1].options) == {"b", "c"}

    def test_escape_keeps_backslash(self):
        assert tokenize("\\{") == [Literal("\\"), Literal("{")]
