"""
minicalc Evaluator
==================

Computes the integer value of a bound expression by walking the tree.

Arithmetic Semantics
--------------------
- Values are 32-bit signed integers; sums, differences, products and
  negations wrap to that range (two's complement), so ``2147483647 + 1``
  is ``-2147483648``
- Division truncates toward zero: ``-7 / 2`` is ``-3``
- A zero divisor and the one overflowing quotient, ``-2147483648 / -1``,
  are runtime faults returned in the EvaluationResult

Evaluation is pure: the only state is the Python call stack.

Example Usage
-------------
>>> from minicalc.binding.binder import bind
>>> from minicalc.evaluator import Evaluator
>>> from minicalc.syntax.parser import parse_text
>>> bound = bind(parse_text("(1 + 2) * 3").root).unwrap()
>>> Evaluator().evaluate(bound).value
9
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from minicalc.binding.nodes import (
    BoundBinaryExpression,
    BoundBinaryOperatorKind,
    BoundExpression,
    BoundLiteralExpression,
    BoundUnaryExpression,
    BoundUnaryOperatorKind,
)
from minicalc.errors import DivisionByZeroError, EvaluationError, IntegerOverflowError
from minicalc.syntax.kinds import INT32_MAX, INT32_MIN

logger = logging.getLogger(__name__)


# =============================================================================
# Evaluation Results
# =============================================================================

class RuntimeFaultKind(Enum):
    """Ways evaluation can fail."""
    DIVISION_BY_ZERO = "division by zero"
    INTEGER_OVERFLOW = "integer overflow"


@dataclass(frozen=True)
class RuntimeFault:
    """
    A failure while computing a value.

    Attributes:
        kind: What went wrong
        position: Offset of the operator that faulted
    """
    kind: RuntimeFaultKind
    position: int

    @property
    def message(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f"ERROR: {self.message}"

    def to_error(self) -> EvaluationError:
        """Return the exception matching this fault."""
        match self.kind:
            case RuntimeFaultKind.DIVISION_BY_ZERO:
                return DivisionByZeroError(self)
            case RuntimeFaultKind.INTEGER_OVERFLOW:
                return IntegerOverflowError(self)
        return EvaluationError(self)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluation: ``value`` on success, ``fault`` otherwise.

    Attributes:
        value: The computed integer
        fault: The runtime fault that stopped evaluation
    """
    value: Optional[int] = None
    fault: Optional[RuntimeFault] = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    def unwrap(self) -> int:
        """
        Return the computed value.

        Raises:
            EvaluationError: If evaluation faulted (DivisionByZeroError or
                IntegerOverflowError)
        """
        if self.fault is not None:
            raise self.fault.to_error()
        return self.value


# =============================================================================
# Integer Helpers
# =============================================================================

def wrap_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return (value - INT32_MIN) % (1 << 32) + INT32_MIN


def truncating_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (not Python's floor)."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


# =============================================================================
# Evaluator
# =============================================================================

class Evaluator:
    """
    Tree-walking evaluator for bound expressions.

    Usage:
        result = Evaluator().evaluate(bound_expression)
        if result.ok:
            print(result.value)
    """

    def evaluate(self, node: BoundExpression) -> EvaluationResult:
        """
        Evaluate a bound expression.

        Args:
            node: Root of the bound tree

        Returns:
            EvaluationResult holding the value or the runtime fault
        """
        result = self._evaluate_expression(node)
        if result.fault is None:
            logger.debug(f"Evaluated to {result.value}")
        else:
            logger.debug(f"Evaluation failed: {result.fault.message}")
        return result

    def _evaluate_expression(self, node: BoundExpression) -> EvaluationResult:
        match node:
            case BoundLiteralExpression(value=value):
                return EvaluationResult(value)
            case BoundUnaryExpression():
                return self._evaluate_unary_expression(node)
            case BoundBinaryExpression():
                return self._evaluate_binary_expression(node)
            case _:
                raise TypeError(f"Unexpected node {type(node).__name__}")

    def _evaluate_unary_expression(self, node: BoundUnaryExpression) -> EvaluationResult:
        operand = self._evaluate_expression(node.operand)
        if operand.fault is not None:
            return operand

        match node.operator.kind:
            case BoundUnaryOperatorKind.IDENTITY:
                return EvaluationResult(operand.value)
            case BoundUnaryOperatorKind.NEGATION:
                return EvaluationResult(wrap_int32(-operand.value))

        raise ValueError(f"Unexpected unary operator {node.operator.kind}")

    def _evaluate_binary_expression(self, node: BoundBinaryExpression) -> EvaluationResult:
        left = self._evaluate_expression(node.left)
        if left.fault is not None:
            return left
        right = self._evaluate_expression(node.right)
        if right.fault is not None:
            return right

        match node.operator.kind:
            case BoundBinaryOperatorKind.ADDITION:
                value = left.value + right.value
            case BoundBinaryOperatorKind.SUBTRACTION:
                value = left.value - right.value
            case BoundBinaryOperatorKind.MULTIPLICATION:
                value = left.value * right.value
            case BoundBinaryOperatorKind.DIVISION:
                if right.value == 0:
                    return self._fault(RuntimeFaultKind.DIVISION_BY_ZERO, node)
                value = truncating_divide(left.value, right.value)
                # Only INT32_MIN / -1 leaves the range
                if value > INT32_MAX:
                    return self._fault(RuntimeFaultKind.INTEGER_OVERFLOW, node)
            case _:
                raise ValueError(f"Unexpected binary operator {node.operator.kind}")

        return EvaluationResult(wrap_int32(value))

    @staticmethod
    def _fault(kind: RuntimeFaultKind, node: BoundBinaryExpression) -> EvaluationResult:
        return EvaluationResult(fault=RuntimeFault(kind, node.position))


# =============================================================================
# Convenience Functions
# =============================================================================

def evaluate(node: BoundExpression) -> EvaluationResult:
    """Evaluate ``node`` with a fresh Evaluator."""
    return Evaluator().evaluate(node)
