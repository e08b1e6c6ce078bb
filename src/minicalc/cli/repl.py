"""
minicalc - Calculator Command-Line Interface
============================================

This module implements the interactive read-eval-print loop and the
one-shot evaluation mode.

Usage Examples
--------------
Interactive session (an empty line or end of input quits):
    $ minicalc
    > 1 + 2 * 3

One-shot evaluation:
    $ minicalc -e "(1 + 2) * 3" -e "8 - 3 - 2"

Without the parse tree, without colours:
    $ minicalc --no-tree --no-color

Verbose mode (debug logging on stderr):
    $ minicalc -v
"""

import logging
import sys
from typing import Optional

import click

from minicalc import __version__
from minicalc.calculator import Calculator, LineResult
from minicalc.cli.errors import ExitCode, handle_cli_exception
from minicalc.config import CalculatorConfig
from minicalc.errors import MiniCalcError
from minicalc.syntax.printer import format_tree

logger = logging.getLogger(__name__)


# =============================================================================
# Output Helpers
# =============================================================================

def setup_logging(level_name: str, verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(message)s",
    )


def _echo(text: str, color: Optional[str]) -> None:
    """Echo text, styled only when a colour is requested."""
    click.echo(click.style(text, fg=color) if color else text)


def report_line(result: LineResult, config: CalculatorConfig) -> None:
    """
    Print the outcome of one line.

    The tree is printed first (green), followed by either the
    diagnostics, the binding fault or runtime fault (red), or the result.
    """
    if config.show_tree:
        _echo(format_tree(result.syntax_tree.root), "green" if config.color else None)

    error_color = "red" if config.color else None

    if result.diagnostics:
        for diagnostic in result.diagnostics:
            _echo(str(diagnostic), error_color)
    elif result.binding_fault is not None:
        _echo(str(result.binding_fault), error_color)
    elif result.runtime_fault is not None:
        _echo(str(result.runtime_fault), error_color)
    else:
        click.echo(f"result is {result.value}")


def evaluate_line(calculator: Calculator, line: str) -> bool:
    """
    Process and report one line.

    A line too deeply nested to process is reported like any other
    failing line.

    Returns:
        True if the line produced a value
    """
    config = calculator.config
    try:
        result = calculator.process(line)
    except MiniCalcError as e:
        _echo(str(e), "red" if config.color else None)
        return False

    report_line(result, config)
    return result.succeeded


def run_repl(calculator: Calculator) -> None:
    """
    Read lines until end of input or a blank line.

    A failing line is reported and the loop continues with the next one.
    """
    config = calculator.config
    stdin = click.get_text_stream("stdin")

    while True:
        click.echo(config.prompt, nl=False)
        line = stdin.readline()
        if not line or line.isspace():
            logger.debug("Blank line or end of input, leaving REPL")
            return

        evaluate_line(calculator, line.rstrip("\r\n"))


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "-e", "--eval", "expressions",
    multiple=True,
    metavar="EXPRESSION",
    help="Evaluate EXPRESSION and exit (can be repeated)",
)
@click.option(
    "--tree/--no-tree",
    default=None,
    help="Print the parse tree of every line (default: on)",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Colour the tree and error output (default: on)",
)
@click.option(
    "--strict-literals",
    is_flag=True,
    help="Report number literals that do not fit in 32 bits",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="minicalc")
def main(
    expressions: tuple[str, ...],
    tree: Optional[bool],
    color: Optional[bool],
    strict_literals: bool,
    verbose: bool,
) -> None:
    """
    Evaluate integer arithmetic one line at a time.

    Each line is parsed into a tree using + - * / and parentheses. Lines
    with errors print their diagnostics; valid lines print the result.

    \b
    Examples:
        minicalc                     # Interactive session
        minicalc -e "1 + 2 * 3"      # Prints the tree and "result is 7"
        minicalc --no-tree -e "-2*3" # Prints "result is -6"
    """
    config = CalculatorConfig.from_env()
    if tree is not None:
        config.show_tree = tree
    if color is not None:
        config.color = color
    if strict_literals:
        config.strict_literals = True

    setup_logging(config.log_level, verbose)
    calculator = Calculator(config)

    try:
        if not expressions:
            run_repl(calculator)
            return

        failed = False
        for expression in expressions:
            if not expression.strip():
                raise click.BadParameter("expression must not be blank", param_hint="'--eval'")
            if not evaluate_line(calculator, expression):
                failed = True

        if failed:
            sys.exit(ExitCode.EVAL_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
