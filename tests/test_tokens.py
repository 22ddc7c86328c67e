"""
Tests for the token value type, keyword table and diagnostics.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from loxfront.lexer import (
    Diagnostic, ErrorReporter, KEYWORDS, LexerError, Token, TokenType,
    tokenize_file, tokenize_string,
)


class TestToken:

    def test_frozen(self):
        token = Token(TokenType.IDENTIFIER, "x", None, 1)
        with pytest.raises(AttributeError):
            token.lexeme = "y"

    def test_equality_and_hash(self):
        a = Token(TokenType.NUMBER, "1", 1.0, 2)
        b = Token(TokenType.NUMBER, "1", 1.0, 2)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Token(TokenType.NUMBER, "1", 1.0, 3)

    def test_kind_alias(self):
        token = Token(TokenType.STRING, '"s"', "s", 1)
        assert token.kind is TokenType.STRING

    def test_str(self):
        assert str(Token(TokenType.VAR, "var", None, 1)) == "VAR('var')"
        assert str(Token(TokenType.NUMBER, "12.5", 12.5, 1)) == "NUMBER('12.5' -> 12.5)"

    def test_predicates(self):
        assert Token(TokenType.NUMBER, "1", 1.0, 1).is_literal
        assert not Token(TokenType.NIL, "nil", None, 1).is_literal
        assert Token(TokenType.WHILE, "while", None, 1).is_keyword
        assert not Token(TokenType.IDENTIFIER, "w", None, 1).is_keyword
        assert Token(TokenType.IDENTIFIER, "w", None, 1).is_identifier


class TestKeywords:

    @pytest.mark.parametrize("word", [
        "and", "class", "else", "false", "for", "fun", "if", "nil", "or",
        "print", "return", "super", "this", "true", "var", "while",
    ])
    def test_maps_to_like_named_type(self, word):
        assert KEYWORDS[word] is TokenType[word.upper()]

    def test_table_size(self):
        assert len(KEYWORDS) == 16

    def test_read_only(self):
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenType.VAR


class TestErrorReporter:

    def test_collects_diagnostics(self):
        reporter = ErrorReporter("main.lox")
        assert not reporter.had_error

        reporter.report(4, "Unexpected character.")
        reporter.report(9, "Unterminated string.")

        assert reporter.had_error
        assert reporter.error_count == 2
        first, second = reporter.diagnostics
        assert first.code == "L001"
        assert second.code == "L002"
        assert first.filename == "main.lox"
        assert second.line == 9

    def test_unknown_message_has_no_code(self):
        reporter = ErrorReporter()
        reporter.report(1, "Something else.")
        assert reporter.diagnostics[0].code is None
        assert reporter.diagnostics[0].help_text is None

    def test_callable(self):
        reporter = ErrorReporter()
        reporter(3, "Unexpected character.")
        assert reporter.diagnostics[0].line == 3

    def test_reset(self):
        reporter = ErrorReporter()
        reporter.report(1, "Unexpected character.")
        reporter.reset()
        assert not reporter.had_error
        assert reporter.error_count == 0


class TestDiagnostic:

    def test_short(self):
        diagnostic = Diagnostic("Unexpected character.", 7)
        assert diagnostic.short() == "[line 7] Error: Unexpected character."

    def test_str(self):
        diagnostic = Diagnostic("Unterminated string.", 2, code="L002",
                                filename="a.lox", help_text="Close it.")
        assert str(diagnostic) == (
            "ERROR[L002]: Unterminated string.\n"
            "  --> a.lox:2\n"
            "  help: Close it.\n"
        )

    def test_location_without_filename(self):
        assert Diagnostic("x", 5).location == "line 5"


class TestConvenienceFunctions:

    def test_tokenize_string(self):
        tokens = tokenize_string("print 1;")
        assert [t.type for t in tokens] == [
            TokenType.PRINT, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF,
        ]

    def test_tokenize_string_raises_on_error(self):
        with pytest.raises(LexerError) as excinfo:
            tokenize_string('@ "open', "bad.lox")
        error = excinfo.value
        assert error.diagnostic.message == "Unexpected character."
        assert [d.code for d in error.diagnostics] == ["L001", "L002"]
        assert "bad.lox:1" in str(error)

    def test_lexer_error_needs_diagnostics(self):
        with pytest.raises(ValueError):
            LexerError([])

    def test_tokenize_file(self, tmp_path):
        path = tmp_path / "prog.lox"
        path.write_text("var a;\nvar b;\n", encoding="utf-8")
        tokens = tokenize_file(str(path))
        assert len(tokens) == 7
        assert tokens[-1].line == 3

    def test_tokenize_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            tokenize_file(str(tmp_path / "missing.lox"))

    def test_tokenize_file_not_utf8(self, tmp_path):
        path = tmp_path / "latin.lox"
        path.write_bytes(b"print \xff;\n")
        with pytest.raises(UnicodeDecodeError):
            tokenize_file(str(path))
