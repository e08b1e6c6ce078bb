"""
minicalc Bound Tree Definitions
===============================

The typed tree produced by the binder. Operators are resolved from
(token kind, operand types) into concrete operator kinds, and every
expression carries the type of the value it produces.

Node Variants
-------------
BoundExpression (closed union)
├── BoundLiteralExpression - integer constant
├── BoundUnaryExpression - identity or negation of an operand
└── BoundBinaryExpression - addition, subtraction, multiplication, division

Parentheses have no bound representation.

Operator Tables
---------------
| Token | Unary    | Binary         | Operand types    | Result  |
|-------|----------|----------------|------------------|---------|
| +     | IDENTITY | ADDITION       | integer          | integer |
| -     | NEGATION | SUBTRACTION    | integer          | integer |
| *     |          | MULTIPLICATION | integer, integer | integer |
| /     |          | DIVISION       | integer, integer | integer |
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from minicalc.errors import BindingError
from minicalc.syntax.kinds import SyntaxKind


# =============================================================================
# Types and Kinds
# =============================================================================

class ValueType(Enum):
    """Types a bound expression can have. Only integers exist."""
    INTEGER = "integer"

    def __str__(self) -> str:
        return self.value


class BoundNodeKind(Enum):
    """Bound node kinds."""
    LITERAL_EXPRESSION = auto()
    UNARY_EXPRESSION = auto()
    BINARY_EXPRESSION = auto()


class BoundUnaryOperatorKind(Enum):
    """Unary operator kinds."""
    IDENTITY = auto()   # +x
    NEGATION = auto()   # -x


class BoundBinaryOperatorKind(Enum):
    """Binary operator kinds."""
    ADDITION = auto()        # +
    SUBTRACTION = auto()     # -
    MULTIPLICATION = auto()  # *
    DIVISION = auto()        # /


# =============================================================================
# Operator Descriptors
# =============================================================================

@dataclass(frozen=True)
class BoundUnaryOperator:
    """
    A unary operator resolved for one operand type.

    Attributes:
        syntax_kind: The token kind that spells the operator
        kind: The resolved operator kind
        operand_type: The operand type the operator accepts
        type: The result type
    """
    syntax_kind: SyntaxKind
    kind: BoundUnaryOperatorKind
    operand_type: ValueType
    type: ValueType

    @classmethod
    def bind(cls, syntax_kind: SyntaxKind, operand_type: ValueType) -> Optional["BoundUnaryOperator"]:
        """Look up the operator for a token kind and operand type, None if undefined."""
        for operator in _UNARY_OPERATORS:
            if operator.syntax_kind is syntax_kind and operator.operand_type is operand_type:
                return operator
        return None


@dataclass(frozen=True)
class BoundBinaryOperator:
    """
    A binary operator resolved for a pair of operand types.

    Attributes:
        syntax_kind: The token kind that spells the operator
        kind: The resolved operator kind
        left_type: Accepted left operand type
        right_type: Accepted right operand type
        type: The result type
    """
    syntax_kind: SyntaxKind
    kind: BoundBinaryOperatorKind
    left_type: ValueType
    right_type: ValueType
    type: ValueType

    @classmethod
    def bind(
        cls,
        syntax_kind: SyntaxKind,
        left_type: ValueType,
        right_type: ValueType,
    ) -> Optional["BoundBinaryOperator"]:
        """Look up the operator for a token kind and operand types, None if undefined."""
        for operator in _BINARY_OPERATORS:
            if (
                operator.syntax_kind is syntax_kind
                and operator.left_type is left_type
                and operator.right_type is right_type
            ):
                return operator
        return None


_UNARY_OPERATORS: tuple[BoundUnaryOperator, ...] = (
    BoundUnaryOperator(SyntaxKind.PLUS_TOKEN, BoundUnaryOperatorKind.IDENTITY,
                       ValueType.INTEGER, ValueType.INTEGER),
    BoundUnaryOperator(SyntaxKind.MINUS_TOKEN, BoundUnaryOperatorKind.NEGATION,
                       ValueType.INTEGER, ValueType.INTEGER),
)

_BINARY_OPERATORS: tuple[BoundBinaryOperator, ...] = (
    BoundBinaryOperator(SyntaxKind.PLUS_TOKEN, BoundBinaryOperatorKind.ADDITION,
                        ValueType.INTEGER, ValueType.INTEGER, ValueType.INTEGER),
    BoundBinaryOperator(SyntaxKind.MINUS_TOKEN, BoundBinaryOperatorKind.SUBTRACTION,
                        ValueType.INTEGER, ValueType.INTEGER, ValueType.INTEGER),
    BoundBinaryOperator(SyntaxKind.STAR_TOKEN, BoundBinaryOperatorKind.MULTIPLICATION,
                        ValueType.INTEGER, ValueType.INTEGER, ValueType.INTEGER),
    BoundBinaryOperator(SyntaxKind.SLASH_TOKEN, BoundBinaryOperatorKind.DIVISION,
                        ValueType.INTEGER, ValueType.INTEGER, ValueType.INTEGER),
)


# =============================================================================
# Bound Expression Variants
# =============================================================================

@dataclass(frozen=True)
class BoundLiteralExpression:
    """
    Integer constant.

    Attributes:
        value: The literal value
    """
    value: int

    @property
    def kind(self) -> BoundNodeKind:
        return BoundNodeKind.LITERAL_EXPRESSION

    @property
    def type(self) -> ValueType:
        return ValueType.INTEGER


@dataclass(frozen=True)
class BoundUnaryExpression:
    """
    Resolved unary operation.

    Attributes:
        operator: The resolved operator descriptor
        operand: The bound operand
        position: Offset of the operator token in the source line
    """
    operator: BoundUnaryOperator
    operand: "BoundExpression"
    position: int = 0

    @property
    def kind(self) -> BoundNodeKind:
        return BoundNodeKind.UNARY_EXPRESSION

    @property
    def type(self) -> ValueType:
        return self.operator.type


@dataclass(frozen=True)
class BoundBinaryExpression:
    """
    Resolved binary operation.

    Attributes:
        left: The bound left operand
        operator: The resolved operator descriptor
        right: The bound right operand
        position: Offset of the operator token in the source line
    """
    left: "BoundExpression"
    operator: BoundBinaryOperator
    right: "BoundExpression"
    position: int = 0

    @property
    def kind(self) -> BoundNodeKind:
        return BoundNodeKind.BINARY_EXPRESSION

    @property
    def type(self) -> ValueType:
        return self.operator.type


BoundExpression = Union[
    BoundLiteralExpression,
    BoundUnaryExpression,
    BoundBinaryExpression,
]


# =============================================================================
# Binding Results
# =============================================================================

@dataclass(frozen=True)
class BindingFault:
    """
    An operator that is not defined for its operand types.

    Attributes:
        message: Description of the problem
        position: Offset of the offending operator token
    """
    message: str
    position: int

    def __str__(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(frozen=True)
class BindResult:
    """
    Outcome of binding: exactly one of ``expression`` and ``fault`` is set.

    Attributes:
        expression: The bound tree on success
        fault: The first binding fault otherwise
    """
    expression: Optional[BoundExpression] = None
    fault: Optional[BindingFault] = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    def unwrap(self) -> BoundExpression:
        """
        Return the bound tree.

        Raises:
            BindingError: If binding produced a fault
        """
        if self.fault is not None:
            raise BindingError(self.fault)
        return self.expression
