"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.
Turns source text into a flat, EOF-terminated list of tokens for the parser.

Key Features:
- Single pass, maximal-munch tokenization
- Reserved word recognition from a fixed, read-only keyword table
- Line tracking for diagnostics
- Error recovery: bad input is reported and skipped, never fatal

Author: loxfront developers
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Cursor, Scanner, scan_tokens, tokenize_string, tokenize_file
from .errors import Diagnostic, ErrorReporter, ErrorSink, LexerError

__all__ = [
    "Scanner",
    "Cursor",
    "scan_tokens",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "ErrorReporter",
    "ErrorSink",
    "LexerError",
]
