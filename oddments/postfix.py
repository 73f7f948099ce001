"""Infix arithmetic evaluation through conversion to postfix notation."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Union


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed or evaluated."""


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except (ValueError, ZeroDivisionError):
        return math.nan


def _guarded(func: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        try:
            return func(x)
        except ValueError:
            return math.nan

    return apply


def _log(x: float) -> float:
    if x == 0:
        return -math.inf
    return _guarded(math.log)(x)


@dataclass(frozen=True, eq=False)
class _Operator:
    symbol: str
    precedence: int
    arity: int
    apply: Optional[Callable[..., float]] = None


_OPEN = _Operator("(", 0, 0)
_CLOSE = _Operator(")", 0, 0)

_SYMBOLS = {
    "+": _Operator("+", 1, 2, lambda a, b: a + b),
    "-": _Operator("-", 1, 2, lambda a, b: a - b),
    "*": _Operator("*", 2, 2, lambda a, b: a * b),
    "/": _Operator("/", 2, 2, _divide),
    "^": _Operator("^", 3, 2, _power),
    "(": _OPEN,
    ")": _CLOSE,
}

_FUNCTIONS = (
    _Operator("sqrt", 4, 1, _guarded(math.sqrt)),
    _Operator("ln", 4, 1, _log),
    _Operator("sin", 4, 1, _guarded(math.sin)),
    _Operator("cos", 4, 1, _guarded(math.cos)),
    _Operator("tan", 4, 1, _guarded(math.tan)),
)

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


def _to_postfix(expression: str) -> list[_Token]:
    output: list[_Token] = []
    ops: list[_Operator] = []
    build = 0.0
    started = False
    fraction = False
    place = 1
    i = 0
    while i < len(expression):
        ch = expression[i]
        if ch in "0123456789":
            started = True
            if fraction:
                build += int(ch) / (place * 10.0)
                place *= 10
            else:
                build = build * 10 + int(ch)
        elif ch == ".":
            if fraction:
                raise ExpressionError("another '.' in number")
            fraction = True
        else:
            fraction = False
            if ch in _SYMBOLS:
                if started:
                    output.append(build)
                if ch == "-" and i == 0:
                    output.append(0.0)
                started, build, place = False, 0.0, 1
                _push_operator(_SYMBOLS[ch], ops, output)
            elif expression.startswith(("PI", "pi"), i):
                i += 1
                output.append(math.pi)
                started, build, place = False, 0.0, 1
            elif ch == "e":
                output.append(math.e)
                started, build, place = False, 0.0, 1
            else:
                func = next(
                    (f for f in _FUNCTIONS if expression.startswith(f.symbol, i)), None
                )
                if func is not None:
                    i += len(func.symbol) - 1
                    started, build, place = False, 0.0, 1
                    _push_operator(func, ops, output)
        i += 1
    if started:
        output.append(build)
    output.extend(reversed(ops))
    return output


def _evaluate_postfix(tokens: list[_Token]) -> float:
    numbers: list[float] = []
    for token in tokens:
        if isinstance(token, float):
            numbers.append(token)
            continue
        if token.apply is None:
            continue
        if len(numbers) < token.arity:
            raise ExpressionError(f"missing operand for {token.symbol!r}")
        args = numbers[len(numbers) - token.arity :]
        del numbers[len(numbers) - token.arity :]
        numbers.append(token.apply(*args))
    if not numbers:
        raise ExpressionError("expression has no value")
    return numbers[-1]


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression with + - * / ^, parentheses, pi, e and functions."""
    return _evaluate_postfix(_to_postfix(expression))


def main(argv: Optional[list[str]] = None) -> int:
    expression = " ".join(argv) if argv else sys.stdin.readline().rstrip("\n")
    try:
        result = evaluate(expression)
    except ExpressionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())