# src/macaca/error_reporter.py
"""
Error types and diagnostic formatting for the Macaca interpreter.

Evaluation failures are never raised: they travel as ``Error`` objects
(see ``object.py``). The exceptions here cover the host-facing surface:
syntax diagnostics collected by the parser, and the aggregate raised by
the convenience API when a program does not parse.
"""

from typing import List, Optional

from .lexer import TAB_WIDTH


class MacacaError(Exception):
    """Base class for every exception raised by the macaca package."""


class MacacaSyntaxError(MacacaError):
    """A problem located in the source text."""

    def __init__(self, message: str, line: int = 0, column: int = 0,
                 filename: str = "<stdin>", suggestion: Optional[str] = None):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion
        super().__init__(message)

    def location(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __str__(self):
        return f"{self.location()}: {self.message}"


class ParseError(MacacaSyntaxError):
    """A parser diagnostic: what the parser expected and what it found."""

    def __init__(self, message: str, expected: Optional[str] = None, found: Optional[str] = None,
                 line: int = 0, column: int = 0, filename: str = "<stdin>",
                 suggestion: Optional[str] = None):
        self.expected = expected
        self.found = found
        super().__init__(message, line=line, column=column, filename=filename, suggestion=suggestion)

    def as_dict(self) -> dict:
        return {
            "expected": self.expected,
            "found": self.found,
            "line": self.line,
            "column": self.column,
            "message": self.message,
        }


class ParserErrors(MacacaError):
    """Raised by ``macaca.parse`` when the parser recorded diagnostics."""

    def __init__(self, errors: List[ParseError]):
        self.errors = list(errors)
        if len(self.errors) == 1:
            summary = str(self.errors[0])
        else:
            summary = f"{len(self.errors)} syntax errors, first: {self.errors[0]}"
        super().__init__(summary)


class ErrorReporter:
    """Renders diagnostics against the source they were reported on."""

    def __init__(self, source: str, filename: str = "<stdin>"):
        self.filename = filename
        self.lines = source.splitlines()

    def source_line(self, line: int) -> Optional[str]:
        if 1 <= line <= len(self.lines):
            return self.lines[line - 1]
        return None

    def format_error(self, error: MacacaSyntaxError) -> str:
        out = [f"{self.filename}:{error.line}:{error.column}: {error.message}"]
        text = self.source_line(error.line)
        if text is not None:
            # columns count a tab as TAB_WIDTH cells
            expanded = text.replace("\t", " " * TAB_WIDTH)
            out.append(f"    {expanded}")
            caret = max(error.column, 1)
            out.append("    " + " " * (caret - 1) + "^")
        if error.suggestion:
            out.append(f"  hint: {error.suggestion}")
        return "\n".join(out)

    def format_all(self, errors) -> str:
        return "\n".join(self.format_error(e) for e in errors)
