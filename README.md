# oddments

A collection of small, self-contained programs and helpers, using only the
standard library.

| Module | What it holds |
| --- | --- |
| `oddments.bigint` | `BigInt`, signed integers of any size stored as decimal digits, with `factorial` and `power` |
| `oddments.linkedlist` | `LinkedList`, a singly linked list with front insertion, iteration and `find` |
| `oddments.combinatorics` | `subsets`, `substrings` and `permutations` of a string, as generators |
| `oddments.postfix` | `evaluate`, an infix calculator working through postfix notation, and `ExpressionError` |
| `oddments.calculator` | `evaluate`, a richer calculator with variables and summation, and `factorial` |
| `oddments.tetris` | `Game` and `Piece`, a falling-blocks game on a 10 × 24 board |
| `oddments.chat` | `ChatServer`, `ChatClient`, `MessageAssembler` and `frame_message`, a length-prefixed TCP chat |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Big integers

```python
from oddments.bigint import BigInt, factorial, power

print(factorial(20))                                  # 2432902008176640000
print(BigInt.from_int(12) * BigInt.from_int(34))      # 408
print(BigInt.from_str("-500") + 123)                  # -377
print(power(2, 64))                                   # 18446744073709551616
```

`BigInt.from_str` takes a leading `-` as the sign and skips any other
non-digit characters; text without digits raises `ValueError`. `BigInt`
supports `+`, `*`, unary `-`, `str()` and `int()`, and mixes with plain
`int` operands. `factorial` and `power` raise `ValueError` for negative
arguments.

## Calculators

`oddments.postfix.evaluate` handles `+ - * / ^`, parentheses, `sqrt`, `ln`,
`sin`, `cos`, `tan`, `pi` (or `PI`) and `e`. A minus sign is only taken as
negation at the very start of the expression.

`oddments.calculator.evaluate` adds `%`, `asin`, `acos`, `atan`, `sinh`,
`cosh`, `tanh`, `asinh`, `acosh`, `atanh`, `abs`, `fac` and `log(base)(x)`,
allows a minus right after `(`, and understands:

- variables: `x^y,x=25/16,y=1/2` gives `1.25`; a definition may use
  variables defined after it, and `e` cannot be a variable;
- summation: `sum(1,4,i)` gives `10.0`; the bounds are truncated to integers.

Functions bind tighter than the binary operators, so `sqrt9+7` is `10.0`.

```python
from oddments.calculator import evaluate

evaluate("ln(e^7)")                # 7.0
evaluate("log(2)(64)")             # 6.0
```

Both raise `oddments.postfix.ExpressionError` (a `ValueError`) for input
they cannot make sense of, such as unknown names or unbalanced brackets.
Division by zero and out-of-domain functions give `inf` or `nan` rather than
raising. `oddments.calculator.factorial` returns `0.0` for negative or
fractional arguments.

## Commands

```
oddments-list [N]           # looks N (default 13) up in the list 9, 7, 5, 3
oddments-strings [TEXT]     # prints subsets, substrings and permutations of TEXT (default 12345)
oddments-postfix [EXPR]     # evaluates EXPR, or one line from standard input; prints "Result: ..."
oddments-calc [EXPR]        # the same with the richer calculator
oddments-tetris [SEED]      # plays the block game in the terminal
oddments-chat               # asks whether to serve or connect, then for the address
oddments-chat server PORT
oddments-chat client HOST PORT
```

The calculator commands exit with status 1 and print the error on standard
error when the expression is rejected.

### The block game

Left and Right move the piece, Up rotates it, holding Down drops it faster,
and Esc or `q` quits. Full rows are cleared. The game draws itself with the
standard `curses` module, so it needs a terminal where that module is
available.

### The chat

Each message is sent as one length byte followed by at most 255 bytes of
UTF-8 text. Once connected, type:

- `send TEXT` – the server sends TEXT to every connected client; a client
  sends it to the server;
- `enum` – on the server, lists the connected clients' addresses and the total;
- `exit` – closes the connection and quits.

The server prints what clients send it but does not pass it on to the other
clients.