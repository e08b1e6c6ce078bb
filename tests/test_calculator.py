# =============================================================================
# test_calculator.py - Pipeline Tests
# =============================================================================
# Tests for the Calculator facade that runs parse, bind and evaluate over
# one line, and for the exception-style evaluate_text helpers.
# =============================================================================

import pytest

from minicalc import (
    BindingError,
    Calculator,
    CalculatorConfig,
    DivisionByZeroError,
    ExpressionTooDeepError,
    IntegerOverflowError,
    LineResult,
    MiniCalcError,
    ParseError,
    evaluate_text,
)
from minicalc.syntax.kinds import SyntaxKind


# =============================================================================
# Successful Line Tests
# =============================================================================

class TestSuccessfulLines:
    """Test lines that produce a value."""

    @pytest.mark.parametrize("source,expected", [
        ("1+2*3", 7),
        ("(1+2)*3", 9),
        ("8-3-2", 3),
        ("-2*3", -6),
        ("-2+3", 1),
        ("2147483647", 2147483647),
    ])
    def test_values(self, source, expected):
        assert evaluate_text(source) == expected

    def test_process_fills_every_stage(self):
        result = Calculator().process("6 / 3")
        assert isinstance(result, LineResult)
        assert result.succeeded
        assert result.value == 2
        assert result.diagnostics == ()
        assert result.bound_expression is not None
        assert result.binding_fault is None
        assert result.runtime_fault is None
        assert result.syntax_tree.root.kind is SyntaxKind.BINARY_EXPRESSION

    def test_zero_is_a_successful_value(self):
        result = Calculator().process("3-3")
        assert result.succeeded
        assert result.value == 0

    def test_lines_are_independent(self):
        """Nothing carries over from one line to the next."""
        calculator = Calculator()
        assert not calculator.process("(").succeeded
        assert calculator.process("1").value == 1
        assert calculator.process("1").diagnostics == ()


# =============================================================================
# Failing Line Tests
# =============================================================================

class TestFailingLines:
    """Test each way a line can fail."""

    def test_bad_character_stops_before_binding(self):
        result = Calculator().process("1+@")
        assert not result.succeeded
        assert any("bad character input '@'" in str(d) for d in result.diagnostics)
        assert result.bound_expression is None
        assert result.value is None

    def test_unclosed_parenthesis(self):
        result = Calculator().process("(1+2")
        assert any("CloseParenthesisToken" in str(d) for d in result.diagnostics)
        assert result.value is None

    def test_division_by_zero(self):
        """5/0 parses and binds cleanly, then faults at runtime."""
        result = Calculator().process("5/0")
        assert result.diagnostics == ()
        assert result.binding_fault is None
        assert result.bound_expression is not None
        assert result.runtime_fault is not None
        assert result.runtime_fault.message == "division by zero"
        assert not result.succeeded

    def test_blank_line_rejected(self):
        with pytest.raises(ValueError):
            Calculator().process("   ")
        with pytest.raises(ValueError):
            Calculator().process("")


# =============================================================================
# Exception-Style API Tests
# =============================================================================

class TestEvaluateText:
    """Test evaluate_text and raise_for_failure."""

    def test_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            evaluate_text("1+@")
        error = exc_info.value
        assert len(error.diagnostics) == 2
        assert error.position == 2
        assert str(error).splitlines()[0] == "ERROR: bad character input '@'"

    def test_division_by_zero_error(self):
        with pytest.raises(DivisionByZeroError):
            Calculator().evaluate_text("1/(1-1)")

    def test_integer_overflow_error(self):
        with pytest.raises(IntegerOverflowError):
            evaluate_text("(-2147483647-1)/-1")

    def test_all_errors_share_base(self):
        for source in ("(", "9/0"):
            with pytest.raises(MiniCalcError):
                evaluate_text(source)

    def test_raise_for_failure_on_success(self):
        Calculator().process("1").raise_for_failure()

    def test_raise_for_failure_binding_fault(self):
        from minicalc.binding import BindingFault

        result = Calculator().process("1")
        faulted = LineResult(
            result.text,
            result.syntax_tree,
            binding_fault=BindingFault("Unary operator '*' is not defined for type integer.", 0),
        )
        with pytest.raises(BindingError):
            faulted.raise_for_failure()


# =============================================================================
# Configuration Tests
# =============================================================================

class TestCalculatorConfig:
    """Test configuration reaching the pipeline."""

    def test_default_config(self):
        assert Calculator().config == CalculatorConfig()

    def test_permissive_literal_evaluates_to_zero(self):
        assert evaluate_text("2147483648 + 1") == 1

    def test_strict_literals(self):
        config = CalculatorConfig(strict_literals=True)
        result = Calculator(config).process("2147483648 + 1")
        assert [d.message for d in result.diagnostics] == [
            "The number 2147483648 isn't valid Int32.",
        ]
        with pytest.raises(ParseError):
            evaluate_text("2147483648", config)


# =============================================================================
# Nesting Depth Tests
# =============================================================================

class TestNestingDepth:
    """Test lines nested deeper than the interpreter stack allows."""

    def test_moderate_nesting_evaluates(self):
        assert evaluate_text("(" * 100 + "7" + ")" * 100) == 7
        assert evaluate_text("-" * 101 + "7") == -7

    @pytest.mark.parametrize("source", [
        "-" * 5000 + "1",
        "(" * 5000 + "1" + ")" * 5000,
    ])
    def test_excessive_nesting_is_rejected(self, source):
        with pytest.raises(ExpressionTooDeepError) as exc_info:
            Calculator().process(source)
        assert isinstance(exc_info.value, MiniCalcError)
        assert str(exc_info.value) == "error: expression is nested too deeply"

    def test_calculator_usable_after_rejection(self):
        calculator = Calculator()
        with pytest.raises(ExpressionTooDeepError):
            calculator.process("(" * 5000 + "1")
        assert calculator.process("1+1").value == 2
