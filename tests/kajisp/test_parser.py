"""Tests for the Kajisp parser (reader)."""

import math

import pytest

from kajisp import (
    KajispParser, KajispToken, KajispParseError, KajispTokenError,
    KajispNumber, KajispBoolean, KajispSymbol, KajispString, KajispList, KajispNil
)


def parse(source: str):
    return KajispParser(source).parse()


class TestParserAtoms:
    """Test reading bare words and strings."""

    @pytest.mark.parametrize("source,expected", [
        ("42", 42.0),
        ("-7", -7.0),
        ("2.5", 2.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("-1.5e-3", -0.0015),
        ("+4", 4.0),
    ])
    def test_numbers(self, source, expected):
        """Float literals read as numbers."""
        assert parse(source) == KajispNumber(expected)

    def test_infinity_and_nan(self):
        """Special float literals are numbers too."""
        assert parse("inf") == KajispNumber(math.inf)
        value = parse("nan")
        assert isinstance(value, KajispNumber)
        assert math.isnan(value.value)

    def test_underscore_is_not_a_number(self):
        """Digit separators are not part of float literals."""
        assert parse("1_000") == KajispSymbol("1_000")

    def test_booleans(self):
        """true and false are boolean literals."""
        assert parse("true") == KajispBoolean(True)
        assert parse("false") == KajispBoolean(False)

    def test_boolean_literals_are_case_sensitive(self):
        """Only lower-case spellings are booleans."""
        assert parse("True") == KajispSymbol("True")

    def test_nil(self):
        """nil reads as the nil value."""
        assert parse("nil") == KajispNil()

    @pytest.mark.parametrize("source", ["+", "concat", "hello", "a-b", "!", "x1"])
    def test_symbols(self, source):
        """Any other bare word is a symbol."""
        assert parse(source) == KajispSymbol(source)

    def test_string(self):
        """Quoted text reads as a string without its quotes."""
        assert parse('"hello world"') == KajispString("hello world")

    def test_empty_string(self):
        """An empty string literal reads as the empty string."""
        assert parse('""') == KajispString("")

    def test_string_has_no_escapes(self):
        """Backslashes are kept verbatim."""
        assert parse('"a\\nb"') == KajispString("a\\nb")

    def test_string_that_looks_like_number(self):
        """Quoted digits stay a string."""
        assert parse('"42"') == KajispString("42")


class TestParserLists:
    """Test reading parenthesized groups."""

    def test_simple_list(self):
        """A group reads as a list of its elements."""
        assert parse("(+ 1 2)") == KajispList((KajispSymbol("+"), KajispNumber(1.0), KajispNumber(2.0)))

    def test_empty_list(self):
        """An empty group reads as the empty list."""
        assert parse("()") == KajispList(())

    def test_nested_lists(self):
        """Groups inside groups read recursively."""
        assert parse("(a (b c) ())") == KajispList((
            KajispSymbol("a"),
            KajispList((KajispSymbol("b"), KajispSymbol("c"))),
            KajispList(()),
        ))

    def test_strings_inside_lists(self):
        """Quotes are interpreted when a group's interior is re-tokenized."""
        assert parse('(concat "a b" "c")') == KajispList((
            KajispSymbol("concat"), KajispString("a b"), KajispString("c")
        ))

    def test_mixed_atoms(self):
        """Each element is read with the atom rules."""
        assert parse("(x true nil 3)") == KajispList((
            KajispSymbol("x"), KajispBoolean(True), KajispNil(), KajispNumber(3.0)
        ))

    def test_whitespace_inside_list(self):
        """Any whitespace separates list elements."""
        assert parse("(\n+\t1\r\n2 )") == parse("(+ 1 2)")


class TestParseToken:
    """Test reading single tokens directly."""

    @pytest.mark.parametrize("text", ["(", ")", '"'])
    def test_one_character_tokens_are_symbols(self, text):
        """A single delimiter character cannot be a group or a string."""
        assert KajispParser().parse_token(KajispToken(text, 0)) == KajispSymbol(text)

    def test_empty_token_is_rejected(self):
        """An empty token is an error."""
        with pytest.raises(KajispParseError, match="Empty token"):
            KajispParser().parse_token(KajispToken("", 0))

    def test_unbalanced_token_is_a_symbol(self):
        """Only matching first and last characters make a group."""
        assert KajispParser().parse_token(KajispToken("(ab", 0)) == KajispSymbol("(ab")


class TestParserErrors:
    """Test parser error reporting."""

    def test_missing_closing_paren(self):
        """A missing ')' aborts with a syntax error."""
        with pytest.raises(KajispTokenError, match="Unterminated parenthesis group"):
            parse("(+ 1 2")

    def test_missing_nested_closing_paren(self):
        """A missing ')' in a nested group is found by the outer scan."""
        with pytest.raises(KajispTokenError):
            parse("(+ 1 (* 2 3)")

    def test_extra_closing_paren(self):
        """A stray ')' aborts with a syntax error."""
        with pytest.raises(KajispTokenError, match="Unmatched closing parenthesis"):
            parse("(+ 1 2))")

    def test_unterminated_string_inside_list(self):
        """An open quote inside a group is found when the group is read."""
        with pytest.raises(KajispTokenError, match="Unterminated string literal"):
            parse('(concat "a)')

    def test_inner_error_position_is_absolute(self):
        """Positions of errors in nested groups refer to the whole program."""
        with pytest.raises(KajispTokenError) as exc_info:
            parse('(concat "a)')

        assert exc_info.value.position == 8

    def test_empty_program(self):
        """An empty program is rejected."""
        with pytest.raises(KajispParseError, match="Empty expression"):
            parse("")

    def test_more_than_one_expression(self):
        """A program is exactly one expression."""
        with pytest.raises(KajispParseError, match="Unexpected token after complete expression"):
            parse("(+ 1 2) (+ 3 4)")

    def test_two_atoms(self):
        """Two bare words are two expressions."""
        with pytest.raises(KajispParseError):
            parse("1 2")

    def test_too_deeply_nested(self):
        """Nesting beyond max_depth is rejected."""
        source = "(" * 20 + ")" * 20
        with pytest.raises(KajispParseError, match="too deeply nested"):
            KajispParser(source, max_depth=10).parse()

    def test_nesting_within_limit(self):
        """Nesting up to max_depth is fine."""
        source = "(" * 10 + ")" * 10
        assert isinstance(KajispParser(source, max_depth=10).parse(), KajispList)

    def test_nesting_beyond_python_stack(self):
        """A max_depth larger than the Python stack still gives a parse error."""
        source = "(+ 1 " * 2000 + "1" + ")" * 2000
        with pytest.raises(KajispParseError, match="too deeply nested"):
            KajispParser(source, max_depth=5000).parse()
