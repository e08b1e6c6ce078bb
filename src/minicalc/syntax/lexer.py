"""
minicalc Lexer (Tokenizer)
==========================

This module converts one line of arithmetic text into classified tokens,
lazily, one token per call.

Classification Order
--------------------
Checked against the character at the cursor, first match wins:

1. End of input   -> EndOfFileToken, text "\\0"
2. ASCII digit    -> NumberToken spanning the maximal digit run
3. Whitespace     -> one WhitespaceToken spanning the whole run
4. + - * / ( )    -> the matching single-character token
5. Anything else  -> BadToken (length 1) plus a diagnostic

Number Literals
---------------
Literals are 32-bit signed integers. A digit run that does not fit is
still emitted as a NumberToken. By default its value is 0 and no
diagnostic is recorded; with ``strict_literals=True`` the lexer also
records "The number <text> isn't valid Int32.".

Example Usage
-------------
>>> from minicalc.syntax.lexer import Lexer
>>> lexer = Lexer("12 + 3")
>>> for token in lexer.tokens():
...     print(token)
Token(NumberToken, 12, @0)
Token(WhitespaceToken, ' ', @2)
Token(PlusToken, '+', @3)
Token(WhitespaceToken, ' ', @4)
Token(NumberToken, 3, @5)
Token(EndOfFileToken, '\\x00', @6)
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, Optional

from minicalc.syntax.diagnostics import Diagnostic, DiagnosticBag
from minicalc.syntax.kinds import (
    INT32_MAX,
    SINGLE_CHARACTER_TOKENS,
    SyntaxKind,
)

logger = logging.getLogger(__name__)

END_OF_FILE_TEXT = "\0"

_INT32_MAX_DIGITS = len(str(INT32_MAX))


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of the source line.

    Tokens are also the leaves of the syntax tree, so they expose the same
    ``kind`` / ``children()`` surface as the expression nodes.

    Attributes:
        kind: The SyntaxKind classification
        position: Offset of the first character in the source line
        text: The raw source text, None for a synthesized token
        value: The integer payload of a NumberToken, otherwise None
    """
    kind: SyntaxKind
    position: int
    text: Optional[str]
    value: Optional[int] = None

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            return f"Token({self.kind}, {self.value}, @{self.position})"
        return f"Token({self.kind}, {self.text!r}, @{self.position})"

    def children(self) -> Iterator["Token"]:
        """Tokens are leaves."""
        return iter(())

    @property
    def is_missing(self) -> bool:
        """Return True if the parser synthesized this token during recovery."""
        return self.text is None


@dataclass(frozen=True)
class ScannedToken:
    """
    Result of scanning one token.

    Attributes:
        token: The token found at the scan position
        next_position: Where scanning continues
        diagnostic: The problem found while scanning, if any
    """
    token: Token
    next_position: int
    diagnostic: Optional[Diagnostic] = None


# =============================================================================
# Scanning
# =============================================================================

def scan_token(text: str, position: int, strict_literals: bool = False) -> ScannedToken:
    """
    Scan the token starting at ``position``.

    This is a pure function of the buffer and the position: it neither
    mutates state nor records diagnostics anywhere, it returns them.

    Args:
        text: The source line
        position: Offset to scan from
        strict_literals: Report digit runs that do not fit in 32 bits

    Returns:
        The token, the position after it and an optional diagnostic
    """
    if position >= len(text):
        return ScannedToken(
            Token(SyntaxKind.END_OF_FILE_TOKEN, len(text), END_OF_FILE_TEXT),
            len(text),
        )

    char = text[position]

    if char in string.digits:
        return _scan_number(text, position, strict_literals)

    if char.isspace():
        end = position
        while end < len(text) and text[end].isspace():
            end += 1
        token = Token(SyntaxKind.WHITESPACE_TOKEN, position, text[position:end])
        return ScannedToken(token, end)

    kind = SINGLE_CHARACTER_TOKENS.get(char)
    if kind is not None:
        return ScannedToken(Token(kind, position, char), position + 1)

    # Unknown character
    return ScannedToken(
        Token(SyntaxKind.BAD_TOKEN, position, char),
        position + 1,
        Diagnostic(f"bad character input '{char}'", position),
    )


def _scan_number(text: str, position: int, strict_literals: bool) -> ScannedToken:
    """Scan the maximal run of ASCII digits starting at ``position``."""
    end = position
    while end < len(text) and text[end] in string.digits:
        end += 1

    literal = text[position:end]
    diagnostic = None

    # Runs longer than INT32_MAX's digits never reach int(), which has a size limit
    significant = literal.lstrip("0")
    if len(significant) > _INT32_MAX_DIGITS:
        value = INT32_MAX + 1
    else:
        value = int(literal)

    if value > INT32_MAX:
        if strict_literals:
            diagnostic = Diagnostic(f"The number {literal} isn't valid Int32.", position)
        else:
            logger.debug(f"Literal {literal} at {position} overflows Int32, using 0")
        value = 0

    return ScannedToken(Token(SyntaxKind.NUMBER_TOKEN, position, literal, value), end, diagnostic)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes one source line.

    The lexer wraps ``scan_token`` with a cursor that only moves forward.
    Once the end of input is reached every further call returns another
    EndOfFileToken at the same position.

    Usage:
        lexer = Lexer(line)
        token = lexer.next_token()

    Attributes:
        text: The source line being tokenized
        diagnostics: Collector for bad characters (and invalid literals)
    """

    def __init__(
        self,
        text: str,
        diagnostics: Optional[DiagnosticBag] = None,
        strict_literals: bool = False,
    ):
        """
        Initialize the lexer.

        Args:
            text: The source line to tokenize
            diagnostics: Bag to record problems in (a fresh one if None)
            strict_literals: Report literals that do not fit in 32 bits
        """
        self.text = text
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticBag()
        self.strict_literals = strict_literals
        self._pos = 0

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    def next_token(self) -> Token:
        """
        Return the next token and advance past it.

        Returns:
            The next Token; EndOfFileToken forever once input is exhausted
        """
        scanned = scan_token(self.text, self._pos, self.strict_literals)
        self._pos = scanned.next_position
        if scanned.diagnostic is not None:
            self.diagnostics.add(scanned.diagnostic)
        return scanned.token

    def tokens(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first EndOfFileToken.

        Yields:
            Token objects, whitespace and bad tokens included
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is SyntaxKind.END_OF_FILE_TOKEN:
                return


def tokenize(text: str, strict_literals: bool = False) -> list[Token]:
    """
    Convenience function: tokenize a whole line.

    Diagnostics are discarded; use ``Lexer`` directly to inspect them.
    """
    return list(Lexer(text, strict_literals=strict_literals).tokens())
