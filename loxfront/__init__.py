"""
loxfront - front end for the Lox scripting language

Architecture:
    loxfront/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command-line scanner / token dump

Author: loxfront developers
License: MIT
"""

__version__ = "0.1.0"
__author__ = "loxfront developers"
__email__ = "dev@loxfront.invalid"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan_tokens

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "scan_tokens",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
