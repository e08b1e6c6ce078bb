"""
minicalc Binder
===============

Walks a syntax tree once and produces the typed bound tree, resolving
each operator token into an operator kind for its operand types.

Binding Rules
-------------
- NumberExpression        -> BoundLiteralExpression (0 if the token has no value)
- UnaryExpression         -> BoundUnaryExpression, operator looked up by
                             (token kind, operand type)
- BinaryExpression        -> BoundBinaryExpression, operator looked up by
                             (token kind, left type, right type)
- ParenthesizedExpression -> the inner expression's bound node

A lookup miss is a binding fault. Faults are returned, not raised: the
first fault stops binding and is handed back in the BindResult.

Example Usage
-------------
>>> from minicalc.syntax.parser import parse_text
>>> from minicalc.binding.binder import Binder
>>> result = Binder().bind(parse_text("-(1 + 2)").root)
>>> result.expression.type
<ValueType.INTEGER: 'integer'>
"""

import logging

from minicalc.binding.nodes import (
    BindingFault,
    BindResult,
    BoundBinaryExpression,
    BoundBinaryOperator,
    BoundLiteralExpression,
    BoundUnaryExpression,
    BoundUnaryOperator,
)
from minicalc.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
    UnaryExpressionSyntax,
)

logger = logging.getLogger(__name__)


class Binder:
    """
    Binds syntax expressions to typed bound expressions.

    The binder holds no state between calls; one instance can bind any
    number of independent trees.

    Usage:
        result = Binder().bind(tree.root)
        if result.ok:
            value = Evaluator().evaluate(result.expression)
    """

    def bind(self, syntax: ExpressionSyntax) -> BindResult:
        """
        Bind an expression syntax tree.

        Args:
            syntax: Root of the expression to bind

        Returns:
            BindResult holding the bound tree or the first fault
        """
        result = self._bind_expression(syntax)
        if result.fault is not None:
            logger.debug(f"Binding failed: {result.fault.message}")
        return result

    def _bind_expression(self, syntax: ExpressionSyntax) -> BindResult:
        match syntax:
            case NumberExpressionSyntax():
                return self._bind_number_expression(syntax)
            case UnaryExpressionSyntax():
                return self._bind_unary_expression(syntax)
            case BinaryExpressionSyntax():
                return self._bind_binary_expression(syntax)
            case ParenthesizedExpressionSyntax():
                return self._bind_expression(syntax.expression)
            case _:
                raise TypeError(f"Unexpected syntax {type(syntax).__name__}")

    def _bind_number_expression(self, syntax: NumberExpressionSyntax) -> BindResult:
        value = syntax.number_token.value
        return BindResult(BoundLiteralExpression(value if value is not None else 0))

    def _bind_unary_expression(self, syntax: UnaryExpressionSyntax) -> BindResult:
        operand = self._bind_expression(syntax.operand)
        if operand.fault is not None:
            return operand

        token = syntax.operator_token
        operator = BoundUnaryOperator.bind(token.kind, operand.expression.type)
        if operator is None:
            return BindResult(fault=BindingFault(
                f"Unary operator '{token.text}' is not defined for type "
                f"{operand.expression.type}.",
                token.position,
            ))

        return BindResult(BoundUnaryExpression(operator, operand.expression, token.position))

    def _bind_binary_expression(self, syntax: BinaryExpressionSyntax) -> BindResult:
        left = self._bind_expression(syntax.left)
        if left.fault is not None:
            return left
        right = self._bind_expression(syntax.right)
        if right.fault is not None:
            return right

        token = syntax.operator_token
        operator = BoundBinaryOperator.bind(
            token.kind, left.expression.type, right.expression.type
        )
        if operator is None:
            return BindResult(fault=BindingFault(
                f"Binary operator '{token.text}' is not defined for types "
                f"{left.expression.type} and {right.expression.type}.",
                token.position,
            ))

        return BindResult(BoundBinaryExpression(
            left.expression, operator, right.expression, token.position
        ))


# =============================================================================
# Convenience Functions
# =============================================================================

def bind(syntax: ExpressionSyntax) -> BindResult:
    """Bind ``syntax`` with a fresh Binder."""
    return Binder().bind(syntax)
