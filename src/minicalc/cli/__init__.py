"""
minicalc Command-Line Interface
===============================

- **minicalc**: interactive calculator REPL and one-shot evaluator

Implemented as a Click-based CLI application with help and error
reporting.
"""

__all__ = ["repl"]
