"""
minicalc Precedence-Climbing Parser
===================================

This module implements a recursive descent parser for one line of
integer arithmetic. It builds an untyped syntax tree and collects the
lexical and syntactic diagnostics for the line.

Grammar
-------
expression  ::= unary_op expression | primary (binary_op expression)*
primary     ::= '(' expression ')' | NUMBER
unary_op    ::= '+' | '-'
binary_op   ::= '+' | '-' | '*' | '/'

Precedence is not spelled out as one rule per level. Instead
``parse_expression`` threads a minimum binding power (see
``minicalc.syntax.kinds``) and nests operators accordingly:

- A unary operator is taken when its precedence is >= the parent's
- A binary operator is taken while its precedence is > the parent's,
  which makes equal-precedence chains left associative

Error Recovery
--------------
The parser never raises on malformed input. ``match`` either consumes
the expected token or records a diagnostic and hands back a synthesized
token of the expected kind without advancing, so parsing always runs to
completion and ``parse()`` always returns a SyntaxTree.

Example Usage
-------------
>>> from minicalc.syntax.parser import parse_text
>>> tree = parse_text("1 + 2 * 3")
>>> tree.root.kind
<SyntaxKind.BINARY_EXPRESSION: 'BinaryExpression'>
>>> list(tree.diagnostics)
[]
"""

import logging
from dataclasses import dataclass

from minicalc.syntax.diagnostics import Diagnostic, DiagnosticBag
from minicalc.syntax.kinds import (
    TRIVIA_KINDS,
    SyntaxKind,
    binary_operator_precedence,
    unary_operator_precedence,
)
from minicalc.syntax.lexer import Lexer, Token
from minicalc.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
    UnaryExpressionSyntax,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Syntax Tree
# =============================================================================

@dataclass(frozen=True)
class SyntaxTree:
    """
    The result of parsing one line.

    Attributes:
        diagnostics: Lexical and syntactic problems, first occurrence first
        root: The root expression
        eof: The EndOfFileToken matched after the expression
    """
    diagnostics: tuple[Diagnostic, ...]
    root: ExpressionSyntax
    eof: Token

    @property
    def has_errors(self) -> bool:
        """Return True if the tree is unreliable for evaluation."""
        return bool(self.diagnostics)


# =============================================================================
# Parser
# =============================================================================

class Parser:
    """
    Recursive descent parser for one source line.

    The constructor runs the lexer to completion and keeps every token
    except whitespace and bad tokens in an immutable tuple. The cursor is
    an index into that tuple and only ever moves forward.

    Usage:
        parser = Parser("(1 + 2) * 3")
        tree = parser.parse()

    Attributes:
        text: The source line
        diagnostics: Collector holding lexer and parser diagnostics
    """

    def __init__(self, text: str, strict_literals: bool = False):
        """
        Initialize the parser.

        Args:
            text: The source line to parse
            strict_literals: Report number literals that do not fit in 32 bits
        """
        self.text = text
        self.diagnostics = DiagnosticBag()

        lexer = Lexer(text, strict_literals=strict_literals)
        self._tokens: tuple[Token, ...] = tuple(
            token for token in lexer.tokens() if token.kind not in TRIVIA_KINDS
        )
        self.diagnostics.extend(lexer.diagnostics)

        # Current position in token stream
        self._pos = 0

    def parse(self) -> SyntaxTree:
        """
        Parse the line into a SyntaxTree.

        Leftover tokens after the expression surface as a mismatch on the
        final EndOfFileToken match.

        Returns:
            SyntaxTree with the root expression and all diagnostics
        """
        root = self.parse_expression()
        eof = self.match(SyntaxKind.END_OF_FILE_TOKEN)
        tree = SyntaxTree(self.diagnostics.to_tuple(), root, eof)
        logger.debug(f"Parsed {self.text!r} with {len(tree.diagnostics)} diagnostic(s)")
        return tree

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The filtered token stream the parser reads."""
        return self._tokens

    def peek(self, offset: int = 0) -> Token:
        """Look at token at current position + offset (EOF past the end)."""
        pos = self._pos + offset
        if pos >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[pos]

    @property
    def current(self) -> Token:
        return self.peek(0)

    def next_token(self) -> Token:
        """Consume and return the current token."""
        token = self.current
        self._pos += 1
        return token

    def match(self, kind: SyntaxKind) -> Token:
        """
        Consume the current token if it has the expected kind.

        Otherwise record an "Unexpected Token" diagnostic and return a
        synthesized token of the expected kind, leaving the cursor on the
        mismatched token.

        Args:
            kind: The expected token kind

        Returns:
            The consumed token, or a synthesized placeholder
        """
        current = self.current
        if current.kind is kind:
            return self.next_token()

        self.diagnostics.report_unexpected_token(
            current.position, current.kind, kind, current.text
        )
        return Token(kind, current.position, None, None)

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def parse_expression(self, parent_precedence: int = 0) -> ExpressionSyntax:
        """
        Parse an expression whose operators bind tighter than the parent's.

        Args:
            parent_precedence: Binding power of the enclosing operator

        Returns:
            The expression syntax
        """
        unary_precedence = unary_operator_precedence(self.current.kind)
        if unary_precedence != 0 and unary_precedence >= parent_precedence:
            operator_token = self.next_token()
            operand = self.parse_expression(unary_precedence)
            left: ExpressionSyntax = UnaryExpressionSyntax(operator_token, operand)
        else:
            left = self.parse_primary_expression()

        while True:
            precedence = binary_operator_precedence(self.current.kind)
            if precedence == 0 or precedence <= parent_precedence:
                break

            operator_token = self.next_token()
            right = self.parse_expression(precedence)
            left = BinaryExpressionSyntax(left, operator_token, right)

        return left

    def parse_primary_expression(self) -> ExpressionSyntax:
        """Parse a parenthesized expression or a number literal."""
        if self.current.kind is SyntaxKind.OPEN_PARENTHESIS_TOKEN:
            open_token = self.next_token()
            expression = self.parse_expression()
            close_token = self.match(SyntaxKind.CLOSE_PARENTHESIS_TOKEN)
            return ParenthesizedExpressionSyntax(open_token, expression, close_token)

        number_token = self.match(SyntaxKind.NUMBER_TOKEN)
        return NumberExpressionSyntax(number_token)


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_text(text: str, strict_literals: bool = False) -> SyntaxTree:
    """
    Parse one line of arithmetic into a SyntaxTree.

    This is a convenience function that combines lexing and parsing.

    Args:
        text: The source line
        strict_literals: Report number literals that do not fit in 32 bits

    Returns:
        The SyntaxTree; check ``diagnostics`` before evaluating
    """
    return Parser(text, strict_literals=strict_literals).parse()
