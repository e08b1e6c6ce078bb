"""
minicalc Syntax Tree Definitions
================================

This module defines the untyped syntax tree produced by the parser.

Node Variants
-------------
ExpressionSyntax (closed union)
├── NumberExpressionSyntax - a number literal token
├── UnaryExpressionSyntax - prefix + or - applied to an operand
├── BinaryExpressionSyntax - left operator right
└── ParenthesizedExpressionSyntax - ( expression )

Token (from the lexer) is the leaf variant of SyntaxNode.

Design Notes
------------
- Every variant is a frozen dataclass carrying only its own fields
- The set of variants is closed; consumers dispatch with ``match``
- Each node owns its children exclusively, so the tree has no sharing
- ``children()`` yields child nodes in source order
"""

from dataclasses import dataclass
from typing import Iterator, Union

from minicalc.syntax.kinds import SyntaxKind
from minicalc.syntax.lexer import Token


# =============================================================================
# Expression Variants
# =============================================================================

@dataclass(frozen=True)
class NumberExpressionSyntax:
    """
    Number literal expression.

    Attributes:
        number_token: The NumberToken (possibly synthesized, with no value)
    """
    number_token: Token

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def children(self) -> Iterator["SyntaxNode"]:
        yield self.number_token


@dataclass(frozen=True)
class UnaryExpressionSyntax:
    """
    Prefix operator expression (+x or -x).

    Attributes:
        operator_token: The + or - token
        operand: The expression the operator applies to
    """
    operator_token: Token
    operand: "ExpressionSyntax"

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.UNARY_EXPRESSION

    def children(self) -> Iterator["SyntaxNode"]:
        yield self.operator_token
        yield self.operand


@dataclass(frozen=True)
class BinaryExpressionSyntax:
    """
    Binary operator expression (a op b).

    Attributes:
        left: Left operand expression
        operator_token: One of + - * /
        right: Right operand expression
    """
    left: "ExpressionSyntax"
    operator_token: Token
    right: "ExpressionSyntax"

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def children(self) -> Iterator["SyntaxNode"]:
        yield self.left
        yield self.operator_token
        yield self.right


@dataclass(frozen=True)
class ParenthesizedExpressionSyntax:
    """
    Grouped expression.

    Attributes:
        open_parenthesis_token: The ( token
        expression: The grouped expression
        close_parenthesis_token: The ) token (synthesized if it was missing)
    """
    open_parenthesis_token: Token
    expression: "ExpressionSyntax"
    close_parenthesis_token: Token

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def children(self) -> Iterator["SyntaxNode"]:
        yield self.open_parenthesis_token
        yield self.expression
        yield self.close_parenthesis_token


ExpressionSyntax = Union[
    NumberExpressionSyntax,
    UnaryExpressionSyntax,
    BinaryExpressionSyntax,
    ParenthesizedExpressionSyntax,
]

SyntaxNode = Union[ExpressionSyntax, Token]

