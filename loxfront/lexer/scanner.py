"""
Lox scanner - turns source text into a list of tokens.

One pass, left to right. Each loop iteration marks the start of a lexeme,
looks at the next character and emits at most one token. Bad characters and
unterminated strings are reported to the error sink and skipped; the scan
always finishes with a single EOF token.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from .tokens import (
    Token, TokenType, LiteralValue, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIXED_TOKENS
)
from .errors import (
    ErrorSink, ErrorReporter, LexerError, ReportFunction, as_report_function,
    UNEXPECTED_CHARACTER, UNTERMINATED_STRING
)


WHITESPACE = frozenset(" \r\t")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


@dataclass
class Cursor:
    """Scan progress: start of the current lexeme, next unread offset, line."""
    start: int = 0
    current: int = 0
    line: int = 1


class Scanner:
    """
    Lox lexical analyzer.

    Each call to scan_tokens() creates its own Cursor and hands it to the
    classification helpers, so nothing about a scan in progress lives on
    the Scanner. The helpers return the token they recognized, or None.
    """

    def __init__(self, source: str, reporter: Union[ErrorSink, ReportFunction]):
        """
        Args:
            source: Complete source text
            reporter: Error sink with report(line, message), or a callable
                with the same signature
        """
        self.source = source
        self._report = as_report_function(reporter)

    def scan_tokens(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        cursor = Cursor()
        tokens: List[Token] = []

        while not self._is_at_end(cursor):
            # Beginning of the next lexeme
            cursor.start = cursor.current
            token = self._scan_token(cursor)
            if token is not None:
                tokens.append(token)

        tokens.append(Token(TokenType.EOF, "", None, cursor.line))
        return tokens

    def _scan_token(self, cursor: Cursor) -> Optional[Token]:
        char = self._advance(cursor)

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(cursor, SINGLE_CHAR_TOKENS[char])
        if char in EQUAL_SUFFIXED_TOKENS:
            with_equal, alone = EQUAL_SUFFIXED_TOKENS[char]
            return self._make_token(cursor, with_equal if self._match(cursor, "=") else alone)
        if char == "/":
            if not self._match(cursor, "/"):
                return self._make_token(cursor, TokenType.SLASH)
            # Line comment runs up to, not including, the newline
            while self._peek(cursor) != "\n" and not self._is_at_end(cursor):
                self._advance(cursor)
            return None
        if char in WHITESPACE:
            return None
        if char == "\n":
            cursor.line += 1
            return None
        if char == '"':
            return self._string(cursor)
        if is_digit(char):
            return self._number(cursor)
        if is_alpha(char):
            return self._identifier(cursor)

        self._report(cursor.line, UNEXPECTED_CHARACTER)
        return None

    def _string(self, cursor: Cursor) -> Optional[Token]:
        while self._peek(cursor) != '"' and not self._is_at_end(cursor):
            if self._peek(cursor) == "\n":
                cursor.line += 1
            self._advance(cursor)

        if self._is_at_end(cursor):
            self._report(cursor.line, UNTERMINATED_STRING)
            return None

        self._advance(cursor)  # closing quote

        value = self.source[cursor.start + 1:cursor.current - 1]
        return self._make_token(cursor, TokenType.STRING, value)

    def _number(self, cursor: Cursor) -> Token:
        while is_digit(self._peek(cursor)):
            self._advance(cursor)

        # A '.' only belongs to the number when a digit follows it
        if self._peek(cursor) == "." and is_digit(self._peek_next(cursor)):
            self._advance(cursor)
            while is_digit(self._peek(cursor)):
                self._advance(cursor)

        return self._make_token(cursor, TokenType.NUMBER, float(self._lexeme(cursor)))

    def _identifier(self, cursor: Cursor) -> Token:
        while is_alphanumeric(self._peek(cursor)):
            self._advance(cursor)

        return self._make_token(cursor, KEYWORDS.get(self._lexeme(cursor), TokenType.IDENTIFIER))

    def _match(self, cursor: Cursor, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end(cursor) or self.source[cursor.current] != expected:
            return False
        cursor.current += 1
        return True

    def _peek(self, cursor: Cursor) -> str:
        if self._is_at_end(cursor):
            return "\0"
        return self.source[cursor.current]

    def _peek_next(self, cursor: Cursor) -> str:
        if cursor.current + 1 >= len(self.source):
            return "\0"
        return self.source[cursor.current + 1]

    def _advance(self, cursor: Cursor) -> str:
        char = self.source[cursor.current]
        cursor.current += 1
        return char

    def _is_at_end(self, cursor: Cursor) -> bool:
        return cursor.current >= len(self.source)

    def _lexeme(self, cursor: Cursor) -> str:
        return self.source[cursor.start:cursor.current]

    def _make_token(self, cursor: Cursor, token_type: TokenType,
                    literal: Optional[LiteralValue] = None) -> Token:
        return Token(token_type, self._lexeme(cursor), literal, cursor.line)


def scan_tokens(source: str, reporter: Union[ErrorSink, ReportFunction]) -> List[Token]:
    """Scan ``source`` with a fresh Scanner, reporting errors to ``reporter``."""
    return Scanner(source, reporter).scan_tokens()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan reported any error
    """
    reporter = ErrorReporter(filename)
    tokens = scan_tokens(source, reporter)

    if reporter.had_error:
        raise LexerError(reporter.diagnostics)

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If the scan reported any error
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
