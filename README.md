# gridcalc

A small desktop calculator. You type an expression or build it with a grid of
buttons. The package splits it into tokens, puts them in postfix order with the
shunting-yard algorithm and evaluates them.

It supports the operators `+`, `-`, `*`, `/` and `^`, parentheses and decimal
numbers. `^` is right-associative, and `*` and `/` bind more tightly than `+`
and `-`.

## Installing

```
pip install .
```

The window uses Tkinter from the standard library. Your Python build needs
Tk support to open it. Everything else works without Tk.

## Running the calculator

```
gridcalc
```

The grid has these buttons:

- the digits and the decimal point
- `+`, `-`, `*`, `/` and `^`
- both parentheses
- `C`, which clears the display
- `=`, which evaluates it

Pressing Enter in the display also evaluates it.

The calculator checks input as it arrives. Text you type into the display is
checked by its last character.

- An operator is only added after a digit or a closing parenthesis.
- A decimal point is only added after a digit.
- A closing parenthesis is only added after a digit or another closing
  parenthesis. At least one opening parenthesis must still be unmatched.
- An opening parenthesis replaces a lone `0` or follows an operator.
- A digit replaces a lone `0`.

Results are shown in their shortest form, for example `20` or `2.5`. Very
large and very small values are shown in exponent form, such as `1e+21`.
Dividing by zero shows `+Inf`, `-Inf` or `NaN`.

## Using it from Python

```python
from gridcalc.display import resolve_expression
from gridcalc.expression import tokenize, shunting_yard, evaluate

resolve_expression("(2+3)*4")          # 20.0

tokens = tokenize("3 + 4 * 2")
postfix = shunting_yard(tokens)
evaluate(postfix)                      # 11.0
```

The package has these modules:

- `gridcalc.tokens` defines `Token` and `TokenType`, together with
  `is_operator`, `get_precedence`, `get_associativity` and `apply_operator`.
- `gridcalc.operations` has `add`, `subtract`, `multiply`, `divide` and
  `power`.
- `gridcalc.expression` has `tokenize`, `shunting_yard` and `evaluate`.
- `gridcalc.display` has `update_display`, which holds the input rules above,
  and `resolve_expression`.
- `gridcalc.app` has `Calculator`, which models the calculator without a
  window:
  - `press` applies one button label.
  - `edit` applies typed text.
  - `clear` resets the display to `0`.
  - `submit` evaluates the display and returns the formatted result.

  The same module has `build_window` and `main`, which start the Tk window.

Expressions follow these rules:

- `tokenize` ignores whitespace and silently drops characters it does not
  know.
- `evaluate` raises `ValueError` for a malformed number, such as `1.2.3`, or
  for an unknown operator.
- An empty expression evaluates to `0.0`.
- A missing operand counts as 0, so a leading `-` negates the number after it.

`power` raises by repeated multiplication. It discards the fractional part of
the exponent, gives the reciprocal for a negative exponent and raises
`ValueError` for an infinite or NaN exponent.

## What it does not do

There is no unary minus except at the start of an expression. There are no
functions, no memory keys and no history of past results. `power` does not
compute fractional powers such as square roots.

## Running the tests

```
pip install ".[test]"
pytest
```