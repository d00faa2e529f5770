"""Rules for editing the calculator display and resolving what it shows."""

from __future__ import annotations

from typing import MutableSequence

from .expression import evaluate, shunting_yard, tokenize
from .tokens import is_operator

_DIGITS = frozenset("0123456789")
_BINARY_OPERATORS = frozenset("*/+-^")


def _is_digit(char: str) -> bool:
    return char in _DIGITS


def update_display(
    label: str, current_text: str, parentheses: MutableSequence[str]
) -> str:
    """Return the display text after pressing ``label`` on ``current_text``.

    ``parentheses`` tracks the parentheses left open and is updated in place.
    Input that would make the expression invalid leaves the text unchanged.
    """
    if not current_text:
        current_text = "0"
    last = current_text[-1]

    if label == ".":
        if not _is_digit(last):
            return current_text
        return current_text + label

    if label == ")":
        if not parentheses:
            return current_text
        if last == ")" or _is_digit(last):
            parentheses.pop()
            return current_text + label
        return current_text

    if label == "(":
        parentheses.append(current_text)
        if current_text == "0":
            return label
        if is_operator(last):
            return current_text + label
        return current_text

    if label in _BINARY_OPERATORS:
        if _is_digit(last) or last == ")":
            return current_text + label
        return current_text

    if current_text == "0":
        return label
    return current_text + label


def resolve_expression(expression: str) -> float:
    """Evaluate an infix arithmetic expression and return its value."""
    return evaluate(shunting_yard(tokenize(expression)))