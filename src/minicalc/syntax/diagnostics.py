"""
Diagnostics
===========

Recorded, non-fatal descriptions of lexical and syntactic problems.

Unlike the exceptions in ``minicalc.errors``, diagnostics never interrupt
processing: the lexer and parser record them and carry on, and the caller
decides from the collected list whether the line can be evaluated.

Diagnostic text format::

    ERROR: bad character input '@'
    ERROR: Unexpected Token <EndOfFileToken>, expected <NumberToken>, at <\\0>
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from minicalc.syntax.kinds import SyntaxKind


class Severity(Enum):
    """Diagnostic severity. Only errors are produced."""
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """
    A single problem found in the source line.

    Attributes:
        message: Description without the severity prefix
        position: Offset into the source line
        severity: Always Severity.ERROR
    """
    message: str
    position: int
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity}: {self.message}"


class DiagnosticBag:
    """
    Collects diagnostics in insertion order.

    One bag is threaded explicitly through a lexing or parsing run; the
    parser merges the lexer's bag into its own before parsing starts.

    Example:
        bag = DiagnosticBag()
        bag.report(3, "bad character input '@'")
        for diagnostic in bag:
            print(diagnostic)
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        return bool(self._diagnostics)

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic."""
        self._diagnostics.append(diagnostic)

    def extend(self, diagnostics) -> None:
        """Append every diagnostic from another bag or iterable, in order."""
        self._diagnostics.extend(diagnostics)

    def report(self, position: int, message: str) -> Diagnostic:
        """Record an error at ``position`` and return it."""
        diagnostic = Diagnostic(message, position)
        self.add(diagnostic)
        return diagnostic

    def report_unexpected_token(
        self,
        position: int,
        actual_kind: SyntaxKind,
        expected_kind: SyntaxKind,
        actual_text: Optional[str],
    ) -> Diagnostic:
        text = actual_text if actual_text is not None else ""
        return self.report(
            position,
            f"Unexpected Token <{actual_kind}>, expected <{expected_kind}>, at <{text}>",
        )

    def to_tuple(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of the collected diagnostics."""
        return tuple(self._diagnostics)
