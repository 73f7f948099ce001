import io
import math

import pytest

from oddments.calculator import evaluate, factorial, main
from oddments.postfix import ExpressionError


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1+3.5", 4.5),
        ("e^3*sin(pi/2)+1*(4-3+tan(0.1))", 21.18587),
        ("e*pi+e^ln(1)", 9.53973),
        ("sin(e*atan(0.01))^2+cos(e*atan(0.01))^2", 1.0),
        ("ln(e^7)", 7.0),
        ("x^y,x=25/16,y=1/2", 1.25),
        ("a*(b+c+d),a=sin(b),b=pi/c,c=1+d,d=abs(cos(pi))", 4.57079),
        ("(1+log(pi)(pi))/(sin(pi/(log10(100)))*2)", 1.0),
    ],
)
def test_worked_examples(expression, expected):
    assert evaluate(expression) == pytest.approx(expected, abs=1e-5)


@pytest.mark.parametrize("expression", ["x+6 y", "x+6 x=6"])
def test_invalid_examples_raise(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


def test_leading_minus_is_unary():
    assert evaluate("-3+5") == evaluate("5-3")


def test_minus_after_open_bracket_is_unary():
    assert evaluate("2*(-3)") == -evaluate("2*3")


def test_log_takes_base_then_number():
    assert evaluate("log(2)(64)") == pytest.approx(evaluate("ln(64)/ln(2)"))


def test_modulo_matches_fmod():
    assert evaluate("7.5%2") == math.fmod(7.5, 2)


def test_power_is_left_associative():
    assert evaluate("2^3^2") == evaluate("(2^3)^2")


def test_functions_bind_tighter_than_addition():
    assert evaluate("sqrt9+7") == evaluate("3+7")


@pytest.mark.parametrize(
    "name, func",
    [
        ("sinh", math.sinh),
        ("cosh", math.cosh),
        ("tanh", math.tanh),
        ("asinh", math.asinh),
        ("atan", math.atan),
        ("asin", math.asin),
    ],
)
def test_named_functions(name, func):
    assert evaluate(f"{name}(0.5)") == pytest.approx(func(0.5))


def test_fac_operator_uses_factorial():
    assert evaluate("fac(6)") == factorial(6)


def test_sqrt_of_negative_is_nan():
    result = evaluate("sqrt(0-1)")
    assert str(result) == "nan"


def test_ln_of_zero_is_negative_infinity():
    assert evaluate("ln(0)") == -math.inf


def test_division_by_zero_is_infinite():
    assert evaluate("1/0") == math.inf


def test_spaces_are_ignored():
    assert evaluate("1 + 2 * 3") == evaluate("1+2*3")


def test_sum_over_range():
    assert evaluate("sum(1,3,i*2)") == evaluate("2+4+6")


def test_sum_continues_after_closing_bracket():
    assert evaluate("sum(1,3,i)*2") == evaluate("(1+2+3)*2")


def test_sum_sees_outer_variables():
    assert evaluate("sum(1,3,i*x),x=2") == evaluate("(1+2+3)*2")


def test_sum_bounds_are_truncated():
    assert evaluate("sum(1.9,3.7,i)") == evaluate("1+2+3")


def test_sum_with_empty_range_is_zero():
    assert evaluate("sum(5,1,i)") == evaluate("0")


def test_unclosed_sum_raises():
    with pytest.raises(ExpressionError):
        evaluate("sum(1,3,i")


def test_variable_defined_in_terms_of_later_one():
    assert evaluate("x+y,x=y+6,y=3") == evaluate("3+6+3")


def test_variable_chain_of_three():
    assert evaluate("x+y+z,x=y+z+2,y=z+3,z=4") == evaluate("13+7+4")


def test_variable_used_before_definition_raises():
    with pytest.raises(ExpressionError):
        evaluate("x+y,x=3,y=x+6")


def test_e_cannot_be_a_variable():
    with pytest.raises(ExpressionError):
        evaluate("e+1,e=2")


@pytest.mark.parametrize("expression", ["1..2", "(1+2", "1+2)", "", "2*"])
def test_malformed_expressions_raise(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


def test_factorial_of_whole_number():
    assert factorial(5) == float(math.factorial(5))


def test_factorial_of_zero_is_one():
    assert factorial(0) == 1.0


@pytest.mark.parametrize("value", [-1, 2.5, math.nan])
def test_factorial_rejects_negative_and_fractional(value):
    assert factorial(value) == 0.0


def test_main_prints_result(capsys):
    assert main(["1+3.5"]) == 0
    assert capsys.readouterr().out.strip() == "4.5"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ln(e^7)\n"))
    assert main() == 0
    assert capsys.readouterr().out.strip() == "7"


def test_main_reports_error(capsys):
    assert main(["x+6 y"]) == 1
    assert "Error" in capsys.readouterr().err