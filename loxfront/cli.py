"""
Command-line front end for the Lox scanner.

    loxfront script.lox          # dump tokens of a file
    loxfront script.lox --json   # same, as a JSON array
    loxfront                     # interactive prompt, one line at a time

Exit codes follow sysexits: 65 for bad input, 66 for an unreadable file.
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import ErrorReporter, Token, scan_tokens


EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_NOINPUT = 66

PROMPT = "> "


def token_to_dict(token: Token) -> dict:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def print_tokens(tokens: List[Token], as_json: bool = False, out: Optional[TextIO] = None) -> None:
    if as_json:
        print(json.dumps([token_to_dict(t) for t in tokens], indent=2), file=out)
        return
    for token in tokens:
        print(token, file=out)


def print_diagnostics(reporter: ErrorReporter, err: Optional[TextIO] = None) -> None:
    for diagnostic in reporter.diagnostics:
        print(diagnostic, file=err or sys.stderr, end="")


def run(source: str, reporter: ErrorReporter, as_json: bool = False,
        out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> List[Token]:
    """Scan one unit of source, print its tokens and any diagnostics."""
    tokens = scan_tokens(source, reporter)
    print_tokens(tokens, as_json, out)
    print_diagnostics(reporter, err)
    return tokens


def run_file(path: str, as_json: bool = False,
             out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or getattr(e, "reason", None) or e
        print(f"Cannot read {path}: {reason}", file=err or sys.stderr)
        return EXIT_NOINPUT

    reporter = ErrorReporter(path)
    run(source, reporter, as_json, out, err)

    if reporter.had_error:
        return EXIT_DATAERR
    return EXIT_OK


def run_prompt(as_json: bool = False, stdin: Optional[TextIO] = None,
               out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Read-scan-print loop; errors on one line don't end the session."""
    reporter = ErrorReporter("<stdin>")

    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = (stdin or sys.stdin).readline()
        if not line:
            print(file=out)
            break
        run(line, reporter, as_json, out, err)
        reporter.reset()

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxfront",
        description="Scan Lox source code and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxfront hello.lox            # Print tokens of hello.lox
    loxfront hello.lox --json     # Print tokens as JSON
    loxfront                      # Start an interactive prompt
        """
    )
    parser.add_argument('script', nargs='?',
                        help='Lox source file to scan (omit for a prompt)')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the loxfront command"""
    args = build_parser().parse_args(argv)

    if args.script is None:
        return run_prompt(args.json)
    return run_file(args.script, args.json)


if __name__ == "__main__":
    sys.exit(main())
