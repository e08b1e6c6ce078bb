"""
Syntax Kinds and Syntax Facts
=============================

The closed set of kinds shared by the lexer, the parser and the printer,
plus the operator precedence tables the parser climbs.

Precedence (lowest to highest)
------------------------------
| Level | Operators        | Used as         |
|-------|------------------|-----------------|
| 0     | everything else  | (not operators) |
| 1     | + -              | binary          |
| 2     | * /              | binary          |
| 2     | + -              | unary           |

Unary operators share the multiplicative tier, so ``-2*3`` parses as
``(-2)*3``.
"""

from enum import Enum


class SyntaxKind(Enum):
    """
    Kinds of tokens and syntax nodes.

    The value of each member is its display name. Diagnostics and the
    tree printer render kinds through ``str()``, so these names are part
    of the user-visible output.
    """

    # === Tokens ===
    BAD_TOKEN = "BadToken"
    END_OF_FILE_TOKEN = "EndOfFileToken"
    NUMBER_TOKEN = "NumberToken"
    WHITESPACE_TOKEN = "WhitespaceToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    STAR_TOKEN = "StarToken"
    SLASH_TOKEN = "SlashToken"
    OPEN_PARENTHESIS_TOKEN = "OpenParenthesisToken"
    CLOSE_PARENTHESIS_TOKEN = "CloseParenthesisToken"

    # === Expressions ===
    NUMBER_EXPRESSION = "NumberExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"

    def __str__(self) -> str:
        return self.value

    @property
    def is_token(self) -> bool:
        """Return True for token kinds (syntax leaves)."""
        return self.value.endswith("Token")


# Single-character operators and delimiters
SINGLE_CHARACTER_TOKENS: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS_TOKEN,
    "-": SyntaxKind.MINUS_TOKEN,
    "*": SyntaxKind.STAR_TOKEN,
    "/": SyntaxKind.SLASH_TOKEN,
    "(": SyntaxKind.OPEN_PARENTHESIS_TOKEN,
    ")": SyntaxKind.CLOSE_PARENTHESIS_TOKEN,
}

# Tokens the parser never sees
TRIVIA_KINDS = frozenset({SyntaxKind.WHITESPACE_TOKEN, SyntaxKind.BAD_TOKEN})

# Integer literals and results are 32-bit signed
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_BINARY_PRECEDENCE: dict[SyntaxKind, int] = {
    SyntaxKind.PLUS_TOKEN: 1,
    SyntaxKind.MINUS_TOKEN: 1,
    SyntaxKind.STAR_TOKEN: 2,
    SyntaxKind.SLASH_TOKEN: 2,
}

_UNARY_PRECEDENCE: dict[SyntaxKind, int] = {
    SyntaxKind.PLUS_TOKEN: 2,
    SyntaxKind.MINUS_TOKEN: 2,
}


def binary_operator_precedence(kind: SyntaxKind) -> int:
    """Return the binding power of ``kind`` as a binary operator, 0 if none."""
    return _BINARY_PRECEDENCE.get(kind, 0)


def unary_operator_precedence(kind: SyntaxKind) -> int:
    """Return the binding power of ``kind`` as a prefix operator, 0 if none."""
    return _UNARY_PRECEDENCE.get(kind, 0)
