"""
Error handling for the Lox lexer.

The scanner never raises for bad input. It hands each problem to an error
sink as a (line, message) pair and keeps going; the caller decides whether
the run failed. ErrorReporter is the sink the rest of the project uses: it
turns reports into Diagnostic records with a code and help text.

Author: loxfront developers
"""

from typing import Callable, List, Optional, Protocol, Union
from dataclasses import dataclass


UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."

# Common error codes for categorization
ERROR_CODES = {
    "L001": UNEXPECTED_CHARACTER,
    "L002": UNTERMINATED_STRING,
}

_CODES_BY_MESSAGE = {message: code for code, message in ERROR_CODES.items()}

_HELP_TEXT = {
    "L001": "This character does not start any Lox token.",
    "L002": "String literals must be closed with a matching '\"' quote.",
}


class ErrorSink(Protocol):
    """Anything the scanner can report lexical errors to."""

    def report(self, line: int, message: str) -> None:
        ...


ReportFunction = Callable[[int, str], None]


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    line: int
    severity: str = "error"
    code: Optional[str] = None
    filename: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def location(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}"
        return f"line {self.line}"

    def short(self) -> str:
        """One-line form: ``[line 3] Error: Unexpected character.``"""
        return f"[line {self.line}] {self.severity.capitalize()}: {self.message}"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised by the convenience tokenizers when the scan reported
    at least one error.

    The scanner itself never raises this.
    """

    def __init__(self, diagnostics: List[Diagnostic]):
        if not diagnostics:
            raise ValueError("LexerError needs at least one diagnostic")
        super().__init__(diagnostics[0].message)
        self.diagnostic = diagnostics[0]
        self.diagnostics = list(diagnostics)

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter:
    """
    Collecting error sink.

    Records every report as a Diagnostic so callers can check ``had_error``
    after a scan, print the diagnostics, or reset between REPL lines.
    """

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        self.diagnostics: List[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        code = _CODES_BY_MESSAGE.get(message)
        self.diagnostics.append(Diagnostic(
            message=message,
            line=line,
            code=code,
            filename=self.filename,
            help_text=_HELP_TEXT.get(code),
        ))

    __call__ = report

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def reset(self) -> None:
        self.diagnostics.clear()


def as_report_function(reporter: Union[ErrorSink, ReportFunction]) -> ReportFunction:
    """Accept either an object with ``report`` or a bare callable."""
    report = getattr(reporter, "report", None)
    if callable(report):
        return report
    if callable(reporter):
        return reporter
    raise TypeError(
        f"reporter must have a report(line, message) method or be callable, "
        f"got {type(reporter).__name__}"
    )
