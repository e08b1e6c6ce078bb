"""
minicalc - Line-at-a-Time Integer Calculator
============================================

This package reads one line of integer arithmetic at a time and either
computes its value or explains why it could not.

Main Components
---------------
- **syntax**: lexer, precedence-climbing parser, syntax tree and printer
    Converts a line of text into a SyntaxTree plus diagnostics

- **binding**: binder and bound tree
    Resolves operators for their operand types

- **evaluator**: tree-walking evaluator
    Computes the 32-bit integer result

- **calculator**: the pipeline facade used by the REPL

Quick Start
-----------
    >>> from minicalc import Calculator
    >>> Calculator().evaluate_text("1 + 2 * 3")
    7

Or use the command-line tool:
    $ minicalc
    > (1 + 2) * 3
    └──BinaryExpression
    ...
    result is 9
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minicalc.errors import (
    MiniCalcError,
    ParseError,
    BindingError,
    EvaluationError,
    DivisionByZeroError,
    IntegerOverflowError,
    ExpressionTooDeepError,
)
from minicalc.config import CalculatorConfig
from minicalc.syntax import (
    Diagnostic,
    Lexer,
    Parser,
    SyntaxKind,
    SyntaxTree,
    Token,
    format_tree,
    parse_text,
)
from minicalc.binding import Binder, BindResult, BindingFault, bind
from minicalc.evaluator import Evaluator, EvaluationResult, RuntimeFault, RuntimeFaultKind, evaluate
from minicalc.calculator import Calculator, LineResult, evaluate_text

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "MiniCalcError",
    "ParseError",
    "BindingError",
    "EvaluationError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "ExpressionTooDeepError",
    # Configuration
    "CalculatorConfig",
    # Syntax
    "Diagnostic",
    "Lexer",
    "Parser",
    "SyntaxKind",
    "SyntaxTree",
    "Token",
    "format_tree",
    "parse_text",
    # Binding
    "Binder",
    "BindResult",
    "BindingFault",
    "bind",
    # Evaluation
    "Evaluator",
    "EvaluationResult",
    "RuntimeFault",
    "RuntimeFaultKind",
    "evaluate",
    # Pipeline
    "Calculator",
    "LineResult",
    "evaluate_text",
]
