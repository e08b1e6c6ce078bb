"""
minicalc Calculator
===================

This module provides the main interface for processing one line of
arithmetic. It orchestrates the complete pipeline:

    Source → Lex → Parse → Bind → Evaluate

Each stage only runs when the previous one succeeded: a line with
diagnostics is never bound, and a line with a binding fault is never
evaluated.

Usage
-----
Command line:
    $ minicalc
    > 1 + 2 * 3

Programmatic:
    >>> from minicalc import Calculator
    >>> result = Calculator().process("(1 + 2) * 3")
    >>> result.value
    9
    >>> Calculator().evaluate_text("8 - 3 - 2")
    3
"""

import logging
from dataclasses import dataclass
from typing import Optional

from minicalc.binding.binder import Binder
from minicalc.binding.nodes import BindingFault, BoundExpression
from minicalc.config import CalculatorConfig
from minicalc.errors import BindingError, ExpressionTooDeepError, ParseError
from minicalc.evaluator import Evaluator, RuntimeFault
from minicalc.syntax.diagnostics import Diagnostic
from minicalc.syntax.parser import Parser, SyntaxTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """
    Everything produced while processing one line.

    Attributes:
        text: The source line
        syntax_tree: Always present
        bound_expression: Present when the line parsed cleanly and bound
        value: Present when evaluation succeeded
        binding_fault: Present when an operator could not be resolved
        runtime_fault: Present when evaluation faulted
    """
    text: str
    syntax_tree: SyntaxTree
    bound_expression: Optional[BoundExpression] = None
    value: Optional[int] = None
    binding_fault: Optional[BindingFault] = None
    runtime_fault: Optional[RuntimeFault] = None

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.syntax_tree.diagnostics

    @property
    def succeeded(self) -> bool:
        """Return True if the line produced a value."""
        return self.value is not None

    def raise_for_failure(self) -> None:
        """
        Raise the exception matching the first failure, if any.

        Raises:
            ParseError: The line has diagnostics
            BindingError: An operator could not be resolved
            EvaluationError: Evaluation faulted (DivisionByZeroError or
                IntegerOverflowError)
        """
        if self.diagnostics:
            raise ParseError(self.diagnostics)
        if self.binding_fault is not None:
            raise BindingError(self.binding_fault)
        if self.runtime_fault is not None:
            raise self.runtime_fault.to_error()


class Calculator:
    """
    Line-at-a-time calculator.

    The calculator keeps no state between lines; every call builds its
    own parser, diagnostics and trees.

    Example:
        calculator = Calculator()
        result = calculator.process("-2 * 3")
        print(result.value)

    Attributes:
        config: Calculator configuration
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the calculator.

        Args:
            config: Configuration (uses defaults if None)
        """
        self.config = config or CalculatorConfig()

    def parse(self, text: str) -> SyntaxTree:
        """Parse ``text`` into a SyntaxTree."""
        return Parser(text, strict_literals=self.config.strict_literals).parse()

    def process(self, text: str) -> LineResult:
        """
        Run the full pipeline over one line.

        Args:
            text: The source line (must not be blank)

        Returns:
            LineResult describing how far the line got

        Raises:
            ValueError: If the line is empty or whitespace only
            ExpressionTooDeepError: If the line nests too deeply to process
        """
        if not text or text.isspace():
            raise ValueError("cannot process an empty line")

        try:
            return self._run_pipeline(text)
        except RecursionError:
            logger.debug(f"Nesting too deep in line of {len(text)} characters")
            raise ExpressionTooDeepError() from None

    def _run_pipeline(self, text: str) -> LineResult:
        tree = self.parse(text)
        if tree.diagnostics:
            logger.debug(f"Skipping evaluation of {text!r}: {len(tree.diagnostics)} diagnostic(s)")
            return LineResult(text, tree)

        bound = Binder().bind(tree.root)
        if bound.fault is not None:
            return LineResult(text, tree, binding_fault=bound.fault)

        evaluated = Evaluator().evaluate(bound.expression)
        if evaluated.fault is not None:
            return LineResult(
                text, tree, bound_expression=bound.expression, runtime_fault=evaluated.fault
            )

        return LineResult(text, tree, bound_expression=bound.expression, value=evaluated.value)

    def evaluate_text(self, text: str) -> int:
        """
        Evaluate one line, raising on any failure.

        Args:
            text: The source line

        Returns:
            The computed integer

        Raises:
            ParseError: The line has diagnostics
            BindingError: An operator could not be resolved
            EvaluationError: Evaluation faulted
            ExpressionTooDeepError: The line nests too deeply to process
        """
        result = self.process(text)
        result.raise_for_failure()
        return result.value


# =============================================================================
# Convenience Functions
# =============================================================================

def evaluate_text(text: str, config: Optional[CalculatorConfig] = None) -> int:
    """Evaluate one line with a fresh Calculator."""
    return Calculator(config).evaluate_text(text)
