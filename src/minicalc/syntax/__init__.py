"""
minicalc Syntax
===============

Lexing and parsing of one line of integer arithmetic:

    source text → Lexer → tokens → Parser → SyntaxTree

The parser never fails hard: malformed input yields a SyntaxTree whose
``diagnostics`` explain what went wrong.
"""

from minicalc.syntax.diagnostics import Diagnostic, DiagnosticBag, Severity
from minicalc.syntax.kinds import SyntaxKind
from minicalc.syntax.lexer import Lexer, Token, scan_token, tokenize
from minicalc.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
    SyntaxNode,
    UnaryExpressionSyntax,
)
from minicalc.syntax.parser import Parser, SyntaxTree, parse_text
from minicalc.syntax.printer import TreePrinter, format_tree

__all__ = [
    # Kinds
    "SyntaxKind",
    # Diagnostics
    "Diagnostic",
    "DiagnosticBag",
    "Severity",
    # Lexer
    "Lexer",
    "Token",
    "scan_token",
    "tokenize",
    # Nodes
    "ExpressionSyntax",
    "SyntaxNode",
    "NumberExpressionSyntax",
    "UnaryExpressionSyntax",
    "BinaryExpressionSyntax",
    "ParenthesizedExpressionSyntax",
    # Parser
    "Parser",
    "SyntaxTree",
    "parse_text",
    # Printer
    "TreePrinter",
    "format_tree",
]
