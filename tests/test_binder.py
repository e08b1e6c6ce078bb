# =============================================================================
# test_binder.py - Binder Unit Tests
# =============================================================================
# Tests for binding syntax trees into typed bound trees.
#
# Test coverage includes:
#   - Literal, unary and binary binding with operator resolution
#   - Parentheses disappearing from the bound tree
#   - Binding faults for operators with no definition
#   - BindResult.unwrap() and BindingError
# =============================================================================

import pytest

from minicalc.binding import (
    Binder,
    BindingFault,
    BoundBinaryExpression,
    BoundBinaryOperator,
    BoundBinaryOperatorKind,
    BoundLiteralExpression,
    BoundNodeKind,
    BoundUnaryExpression,
    BoundUnaryOperator,
    BoundUnaryOperatorKind,
    ValueType,
    bind,
)
from minicalc.errors import BindingError, MiniCalcError
from minicalc.syntax.kinds import SyntaxKind
from minicalc.syntax.lexer import Token
from minicalc.syntax.nodes import (
    BinaryExpressionSyntax,
    NumberExpressionSyntax,
    UnaryExpressionSyntax,
)
from minicalc.syntax.parser import parse_text


# =============================================================================
# Helper Functions
# =============================================================================

def bind_source(source: str):
    """Parse and bind source, returning the bound tree."""
    tree = parse_text(source)
    assert tree.diagnostics == ()
    return bind(tree.root).unwrap()


def number(value: int, position: int = 0) -> NumberExpressionSyntax:
    """Build a number literal syntax node by hand."""
    return NumberExpressionSyntax(Token(SyntaxKind.NUMBER_TOKEN, position, str(value), value))


# =============================================================================
# Successful Binding Tests
# =============================================================================

class TestBinding:
    """Test binding of well-formed trees."""

    def test_literal(self):
        bound = bind_source("12")
        assert bound == BoundLiteralExpression(12)
        assert bound.kind is BoundNodeKind.LITERAL_EXPRESSION
        assert bound.type is ValueType.INTEGER

    def test_missing_literal_binds_to_zero(self):
        """A synthesized number token has no value and binds as 0."""
        syntax = NumberExpressionSyntax(Token(SyntaxKind.NUMBER_TOKEN, 0, None))
        assert Binder().bind(syntax).expression == BoundLiteralExpression(0)

    @pytest.mark.parametrize("source,kind", [
        ("+1", BoundUnaryOperatorKind.IDENTITY),
        ("-1", BoundUnaryOperatorKind.NEGATION),
    ])
    def test_unary_operator_resolved(self, source, kind):
        bound = bind_source(source)
        assert isinstance(bound, BoundUnaryExpression)
        assert bound.operator.kind is kind
        assert bound.type is ValueType.INTEGER
        assert bound.position == 0

    @pytest.mark.parametrize("source,kind", [
        ("1+2", BoundBinaryOperatorKind.ADDITION),
        ("1-2", BoundBinaryOperatorKind.SUBTRACTION),
        ("1*2", BoundBinaryOperatorKind.MULTIPLICATION),
        ("1/2", BoundBinaryOperatorKind.DIVISION),
    ])
    def test_binary_operator_resolved(self, source, kind):
        bound = bind_source(source)
        assert isinstance(bound, BoundBinaryExpression)
        assert bound.kind is BoundNodeKind.BINARY_EXPRESSION
        assert bound.operator.kind is kind
        assert bound.position == 1

    def test_parentheses_vanish(self):
        """A parenthesized expression binds to its inner expression."""
        assert bind_source("((3))") == BoundLiteralExpression(3)

        bound = bind_source("(1+2)")
        assert isinstance(bound, BoundBinaryExpression)
        assert bound.left == BoundLiteralExpression(1)
        assert bound.right == BoundLiteralExpression(2)
        assert bound.position == 2

    def test_binder_is_reusable(self):
        binder = Binder()
        first = binder.bind(parse_text("1+2").root)
        second = binder.bind(parse_text("1+2").root)
        assert first == second


# =============================================================================
# Operator Table Tests
# =============================================================================

class TestOperatorLookup:
    """Test the operator descriptor lookups."""

    def test_unary_lookup_miss(self):
        assert BoundUnaryOperator.bind(SyntaxKind.STAR_TOKEN, ValueType.INTEGER) is None

    def test_binary_lookup_miss(self):
        assert BoundBinaryOperator.bind(
            SyntaxKind.OPEN_PARENTHESIS_TOKEN, ValueType.INTEGER, ValueType.INTEGER
        ) is None

    def test_binary_lookup_hit(self):
        operator = BoundBinaryOperator.bind(
            SyntaxKind.SLASH_TOKEN, ValueType.INTEGER, ValueType.INTEGER
        )
        assert operator.kind is BoundBinaryOperatorKind.DIVISION
        assert operator.type is ValueType.INTEGER


# =============================================================================
# Binding Fault Tests
# =============================================================================

class TestBindingFaults:
    """Test faults from hand-built trees the parser never produces."""

    def test_undefined_unary_operator(self):
        syntax = UnaryExpressionSyntax(Token(SyntaxKind.STAR_TOKEN, 0, "*"), number(2, 1))
        result = Binder().bind(syntax)
        assert not result.ok
        assert result.expression is None
        assert result.fault == BindingFault(
            "Unary operator '*' is not defined for type integer.", 0
        )
        assert str(result.fault) == "ERROR: Unary operator '*' is not defined for type integer."

    def test_undefined_binary_operator(self):
        syntax = BinaryExpressionSyntax(
            number(1, 0), Token(SyntaxKind.CLOSE_PARENTHESIS_TOKEN, 1, ")"), number(2, 2)
        )
        result = bind(syntax)
        assert result.fault.message == (
            "Binary operator ')' is not defined for types integer and integer."
        )
        assert result.fault.position == 1

    def test_first_fault_wins(self):
        """A fault in an operand stops binding of the enclosing node."""
        bad = UnaryExpressionSyntax(Token(SyntaxKind.SLASH_TOKEN, 3, "/"), number(1, 4))
        syntax = BinaryExpressionSyntax(number(1, 0), Token(SyntaxKind.PLUS_TOKEN, 1, "+"), bad)
        result = bind(syntax)
        assert result.fault.position == 3

    def test_unwrap_raises(self):
        syntax = UnaryExpressionSyntax(Token(SyntaxKind.STAR_TOKEN, 5, "*"), number(2, 6))
        with pytest.raises(BindingError) as exc_info:
            bind(syntax).unwrap()
        assert exc_info.value.position == 5
        assert isinstance(exc_info.value, MiniCalcError)
        assert "not defined for type integer" in str(exc_info.value)

    def test_unknown_node_rejected(self):
        with pytest.raises(TypeError):
            Binder().bind("1 + 2")
