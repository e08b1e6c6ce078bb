"""
minicalc Error Hierarchy
========================

This module defines the exception hierarchy for minicalc. All exceptions
inherit from MiniCalcError, allowing callers to catch every calculator
failure with a single except clause if desired.

Exception Hierarchy
-------------------
MiniCalcError (base)
├── ParseError - the line produced lexical or syntactic diagnostics
├── BindingError - operator not defined for the operand types
├── EvaluationError - runtime fault while computing the value
│   ├── DivisionByZeroError - integer division with a zero divisor
│   └── IntegerOverflowError - division result outside 32 bits
└── ExpressionTooDeepError - nesting exceeds the interpreter stack

Diagnostics vs. Exceptions
--------------------------
Lexical and syntactic problems are never raised while parsing: they are
recorded as diagnostics on the SyntaxTree. Binding and evaluation return
explicit result values carrying a fault. The exceptions below exist for
callers that prefer exception-style control flow (``unwrap()`` on a result,
or ``Calculator.evaluate_text``).

Error messages follow this format:
    error: description (at position N)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from minicalc.binding.nodes import BindingFault
    from minicalc.evaluator import RuntimeFault
    from minicalc.syntax.diagnostics import Diagnostic


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCalcError(Exception):
    """
    Base exception for all minicalc errors.

    Attributes:
        message: The error description
        position: Offset into the source line, when known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as 'error: message (at position N)'."""
        if self.position is not None:
            return f"error: {self.message} (at position {self.position})"
        return f"error: {self.message}"


# =============================================================================
# Parse Errors
# =============================================================================

class ParseError(MiniCalcError):
    """
    The line could not be parsed cleanly.

    Raised only by exception-style helpers; the parser itself always
    returns a SyntaxTree. The message is the diagnostics report, one
    diagnostic per line, in the order they were produced.
    """

    def __init__(self, diagnostics: Sequence["Diagnostic"]):
        self.diagnostics = tuple(diagnostics)
        position = self.diagnostics[0].position if self.diagnostics else None
        super().__init__("\n".join(str(d) for d in self.diagnostics), position)

    def _format_message(self) -> str:
        """Return the report as-is - diagnostics are already formatted."""
        return self.message


# =============================================================================
# Binding Errors
# =============================================================================

class BindingError(MiniCalcError):
    """
    An operator could not be resolved for its operand types.

    In the single-type calculator this only happens for hand-built
    syntax trees; the parser never produces an unbindable operator.
    """

    def __init__(self, fault: "BindingFault"):
        self.fault = fault
        super().__init__(fault.message, fault.position)


# =============================================================================
# Evaluation Errors
# =============================================================================

class EvaluationError(MiniCalcError):
    """Runtime fault while evaluating a bound expression."""

    def __init__(self, fault: "RuntimeFault"):
        self.fault = fault
        super().__init__(fault.message, fault.position)


class DivisionByZeroError(EvaluationError):
    """
    Integer division with a zero divisor.

    Example:
        5/0
    """
    pass


class IntegerOverflowError(EvaluationError):
    """
    A division whose exact result does not fit in 32 bits.

    Example:
        (-2147483647-1)/-1
    """
    pass


# =============================================================================
# Resource Errors
# =============================================================================

class ExpressionTooDeepError(MiniCalcError):
    """
    The line nests operators or parentheses too deeply to process.

    Parsing, binding and evaluation recurse once per nesting level, so a
    pathologically nested line exhausts the interpreter stack. The line is
    rejected as a whole; the calculator itself keeps working.
    """

    def __init__(self):
        super().__init__("expression is nested too deeply")
