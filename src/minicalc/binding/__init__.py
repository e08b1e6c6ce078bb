"""
minicalc Binding
================

Turns the untyped syntax tree into a typed bound tree ready for
evaluation.
"""

from minicalc.binding.binder import Binder, bind
from minicalc.binding.nodes import (
    BindingFault,
    BindResult,
    BoundBinaryExpression,
    BoundBinaryOperator,
    BoundBinaryOperatorKind,
    BoundExpression,
    BoundLiteralExpression,
    BoundNodeKind,
    BoundUnaryExpression,
    BoundUnaryOperator,
    BoundUnaryOperatorKind,
    ValueType,
)

__all__ = [
    "Binder",
    "bind",
    "BindingFault",
    "BindResult",
    "BoundExpression",
    "BoundLiteralExpression",
    "BoundUnaryExpression",
    "BoundBinaryExpression",
    "BoundUnaryOperator",
    "BoundBinaryOperator",
    "BoundUnaryOperatorKind",
    "BoundBinaryOperatorKind",
    "BoundNodeKind",
    "ValueType",
]
