"""Expression calculator with functions, variables and summation.

Syntax overview:

* ``expression,x=expression,y=expression`` defines single-letter variables;
  a definition may refer to variables defined after it.
* Functions bind tighter than binary operators, so brackets are advisable.
  Functions of two arguments take each one in brackets: ``log(2)(64)``.
* ``sum(lower,upper,expression)`` adds up ``expression`` for every integer
  ``i`` from ``lower`` to ``upper``; the bounds are truncated to integers.
* ``e`` is Euler's number and ``pi``/``PI`` is pi.
"""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Union

from oddments.postfix import ExpressionError

_NUMBER_RUN = re.compile(r"\d[\d.]*")
_NUMBER_VALUE = re.compile(r"\d+(?:\.\d*)?")
_DIGITS = "0123456789"


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    if a == 0 and b < 0:
        return math.inf
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _modulo(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _ln(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _atanh(x: float) -> float:
    if abs(x) == 1:
        return math.copysign(math.inf, x)
    try:
        return math.atanh(x)
    except ValueError:
        return math.nan


def _guarded(func: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        try:
            return func(x)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan

    return apply


def factorial(num: float) -> float:
    """Return num! for a non-negative whole number, and 0 for anything else."""
    if not math.isfinite(num) or num < 0 or not float(num).is_integer():
        return 0.0
    try:
        return float(math.factorial(int(num)))
    except OverflowError:
        return math.inf


@dataclass(frozen=True, eq=False)
class _Operator:
    symbol: str
    precedence: int
    arity: int
    apply: Optional[Callable[..., float]] = None


_OPEN = _Operator("(", 0, 0)
_CLOSE = _Operator(")", 0, 0)
_MINUS = _Operator("-", 1, 2, lambda a, b: a - b)

_TABLE = (
    _Operator("+", 1, 2, lambda a, b: a + b),
    _MINUS,
    _Operator("/", 2, 2, _divide),
    _Operator("*", 2, 2, lambda a, b: a * b),
    _OPEN,
    _CLOSE,
    _Operator("%", 2, 2, _modulo),
    _Operator("^", 3, 2, _power),
    _Operator("sqrt", 4, 1, _guarded(math.sqrt)),
    _Operator("ln", 4, 1, _ln),
    _Operator("sin", 4, 1, _guarded(math.sin)),
    _Operator("cos", 4, 1, _guarded(math.cos)),
    _Operator("tan", 4, 1, _guarded(math.tan)),
    _Operator("asin", 4, 1, _guarded(math.asin)),
    _Operator("acos", 4, 1, _guarded(math.acos)),
    _Operator("atan", 4, 1, _guarded(math.atan)),
    _Operator("sinh", 4, 1, _guarded(math.sinh)),
    _Operator("cosh", 4, 1, _guarded(math.cosh)),
    _Operator("tanh", 4, 1, _guarded(math.tanh)),
    _Operator("asinh", 4, 1, _guarded(math.asinh)),
    _Operator("acosh", 4, 1, _guarded(math.acosh)),
    _Operator("atanh", 4, 1, _atanh),
    _Operator("abs", 4, 1, math.fabs),
    _Operator("fac", 4, 1, factorial),
    # log(base)(number)
    _Operator("log", 4, 2, lambda base, x: _divide(_ln(x), _ln(base))),
)

# Longest names first, so that "sinh" is not read as "sin" followed by "h".
_OPERATORS = sorted(_TABLE, key=lambda op: -len(op.symbol))

_Token = Union[float, _Operator]


def _push_operator(op: _Operator, ops: list[_Operator], output: list[_Token]) -> None:
    if op is _CLOSE:
        while ops:
            top = ops.pop()
            if top is _OPEN:
                return
            output.append(top)
        raise ExpressionError("unmatched ')'")
    while ops and not (
        ops[-1].precedence < op.precedence or ops[-1] is _OPEN or op is _OPEN
    ):
        output.append(ops.pop())
    ops.append(op)


def _extract_variables(text: str) -> dict[str, float]:
    """Evaluate every 'letter=expression' definition found in text."""
    variables: dict[str, float] = {}
    pos = text.find("=")
    while pos != -1:
        if pos == 0:
            raise ExpressionError("definition without a variable name")
        letter = text[pos - 1]
        if letter == "e":
            raise ExpressionError("'e' is reserved and cannot be a variable")
        if not _is_letter(letter):
            raise ExpressionError(f"invalid variable name {letter!r}")
        value = _evaluate(text[pos + 1 :])
        variables.setdefault(letter, value)
        pos = text.find("=", pos + 1)
    return variables


def _matching_bracket(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == -1:
                return index
    raise ExpressionError("unclosed bracket in sum")


def _bound(text: str) -> int:
    value = _evaluate(text)
    if not math.isfinite(value):
        raise ExpressionError("sum bound is not a finite number")
    return int(value)


def _summation(text: str, start: int) -> tuple[float, int]:
    """Evaluate sum(lower,upper,expression) at start; return it and the closing index."""
    body_start = start + len("sum(")
    close = _matching_bracket(text, body_start)
    rest = text[body_start:close] + "," + text[close + 1 :]
    first = rest.find(",")
    second = rest.find(",", first + 1)
    if second == -1:
        raise ExpressionError("sum needs a lower bound, an upper bound and an expression")
    lower = _bound(rest)
    upper = _bound(rest[first + 1 :])
    expression = rest[second + 1 :]
    total = 0.0
    for i in range(lower, upper + 1):
        total += _evaluate(f"{expression},i={i}")
    return total, close


def _to_postfix(text: str, variables: dict[str, float]) -> list[_Token]:
    output: list[_Token] = []
    ops: list[_Operator] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ",":
            break
        if ch in _DIGITS:
            run = _NUMBER_RUN.match(text, i).group()
            if ".." in run:
                raise ExpressionError("two dots in a row")
            output.append(float(_NUMBER_VALUE.match(run).group()))
            i += len(run)
            continue
        if ch == ".":
            if text.startswith("..", i):
                raise ExpressionError("two dots in a row")
        elif ch == "-":
            if i == 0 or text[i - 1] == "(":
                output.append(0.0)
            _push_operator(_MINUS, ops, output)
        elif text.startswith("sum(", i):
            value, i = _summation(text, i)
            output.append(value)
        elif text.startswith(("PI", "pi"), i):
            i += 1
            output.append(math.pi)
        elif ch == "e":
            output.append(math.e)
        else:
            op = next((op for op in _OPERATORS if text.startswith(op.symbol, i)), None)
            if op is not None:
                i += len(op.symbol) - 1
                _push_operator(op, ops, output)
            elif ch in variables:
                output.append(variables[ch])
            elif _is_letter(ch):
                raise ExpressionError(f"unknown name {ch!r}")
        i += 1
    output.extend(reversed(ops))
    return output


def _evaluate_postfix(tokens: list[_Token]) -> float:
    numbers: list[float] = []
    for token in tokens:
        if isinstance(token, float):
            numbers.append(token)
            continue
        if token.apply is None:
            raise ExpressionError("unmatched '('")
        if len(numbers) < token.arity:
            raise ExpressionError(f"missing operand for {token.symbol!r}")
        args = numbers[len(numbers) - token.arity :]
        del numbers[len(numbers) - token.arity :]
        numbers.append(token.apply(*args))
    if not numbers:
        raise ExpressionError("expression has no value")
    if len(numbers) > 1:
        raise ExpressionError("operands without an operator between them")
    return numbers[0]


def _evaluate(text: str) -> float:
    variables = _extract_variables(text)
    return _evaluate_postfix(_to_postfix(text, variables))


def evaluate(expression: str) -> float:
    """Evaluate an expression, with optional variable definitions after commas."""
    return _evaluate(expression)


def main(argv: Optional[list[str]] = None) -> int:
    expression = " ".join(argv) if argv else sys.stdin.readline().rstrip("\n")
    try:
        result = evaluate(expression)
    except ExpressionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"{result:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())