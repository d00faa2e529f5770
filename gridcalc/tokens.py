"""Tokens of arithmetic expressions and the operator tables that describe them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, MutableSequence

OPERATORS = frozenset("+-*/^")

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_ASSOCIATIVITY = {"+": "left", "-": "left", "*": "left", "/": "left", "^": "right"}


class TokenType(Enum):
    """Kinds of token produced by the tokenizer."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True)
class Token:
    """A single token of an expression."""

    value: str
    type: TokenType
    precedence: int = 0
    associativity: str = ""

    def __str__(self) -> str:
        return (
            f"Token({self.value}, T={self.type.value}, "
            f"P={self.precedence}, A={self.associativity})"
        )


def is_operator(char: str) -> bool:
    """Return True if ``char`` is one of the binary operators."""
    return char in OPERATORS and len(char) == 1


def get_associativity(op: str) -> str:
    """Return "left" or "right" for a known operator, "" otherwise."""
    return _ASSOCIATIVITY.get(op, "")


def get_precedence(op: str) -> int:
    """Return the binding strength of an operator, 0 if it is not one."""
    return _PRECEDENCE.get(op, 0)


def apply_operator(
    stack: MutableSequence[float], operation: Callable[[float, float], float]
) -> float:
    """Pop the right then the left operand from ``stack`` and apply ``operation``.

    A missing operand counts as 0, so a leading minus negates the number after it.
    """
    right = stack.pop() if stack else 0.0
    left = stack.pop() if stack else 0.0
    return operation(left, right)