"""
Tests for the prefix expression lexer.
"""

import pytest

from backend.objexpr.logic.lexer import Lexeme, Lexer


def collect(text):
    """Return all lexemes of text as (text, start) pairs."""
    lexer = Lexer(text)
    result = []
    while True:
        lexeme = lexer.next_lexeme()
        if not lexeme.text:
            return result
        result.append((lexeme.text, lexeme.start))


class TestLexer:
    """Tests for Lexer.next_lexeme."""

    def test_simple_expression(self):
        assert collect("(+ x1 2)") == [
            ("(", 0), ("+", 1), ("x1", 3), ("2", 6), (")", 7),
        ]

    def test_brackets_are_standalone(self):
        """Test brackets split runs even without whitespace."""
        assert [t for t, _ in collect("((a)b)")] == ["(", "(", "a", ")", "b", ")"]

    def test_runs_are_unclassified(self):
        """Test that any non-bracket run is one lexeme."""
        assert [t for t, _ in collect("  arith-mean  -1.5e3 ?!")] == [
            "arith-mean", "-1.5e3", "?!",
        ]

    def test_mixed_whitespace(self):
        assert collect("\t(\n*  x ) ") == [("(", 1), ("*", 3), ("x", 6), (")", 8)]

    def test_end_of_input(self):
        """Test an empty lexeme is returned at the end, positioned at the end."""
        lexer = Lexer("x  ")
        lexer.next_lexeme()
        end = lexer.next_lexeme()
        assert end == Lexeme("", 3)
        assert lexer.at_end

    def test_lexeme_end(self):
        assert Lexeme("med3", 4).end == 8


class TestPushback:
    """Tests for the one-lexeme pushback slot."""

    def test_pushback_returns_same_lexeme(self):
        lexer = Lexer("(+ 1 2)")
        first = lexer.next_lexeme()
        lexer.push_back(first)
        assert not lexer.at_end
        assert lexer.next_lexeme() is first
        assert lexer.next_lexeme().text == "+"

    def test_only_one_lexeme_of_pushback(self):
        lexer = Lexer("a b")
        a = lexer.next_lexeme()
        b = lexer.next_lexeme()
        lexer.push_back(b)
        with pytest.raises(RuntimeError):
            lexer.push_back(a)

    def test_pushed_back_lexeme_blocks_end(self):
        """Test at_end stays False while a lexeme is pushed back."""
        lexer = Lexer(")")
        closing = lexer.next_lexeme()
        assert lexer.pos == 1
        lexer.push_back(closing)
        assert not lexer.at_end


class TestWhitespace:
    """Tests for the whitespace set."""

    def test_unicode_spaces_separate_lexemes(self):
        assert [t for t, _ in collect("a\u00a0b\u3000c\ufeffd")] == ["a", "b", "c", "d"]

    def test_separator_controls_are_not_whitespace(self):
        """Test \\x1c-\\x1f stay inside a lexeme."""
        assert [t for t, _ in collect("1\x1c2 3\x1f")] == ["1\x1c2", "3\x1f"]
