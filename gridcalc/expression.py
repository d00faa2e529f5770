"""Tokenizing, infix-to-postfix conversion and evaluation of expressions."""

from __future__ import annotations

from typing import Iterable

from .operations import add, divide, multiply, power, subtract
from .tokens import (
    Token,
    TokenType,
    apply_operator,
    get_associativity,
    get_precedence,
    is_operator,
)

_OPERATIONS = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "^": power,
}


def _number_token(text: str) -> Token:
    return Token(text, TokenType.NUMBER)


def tokenize(expression: str) -> list[Token]:
    """Split ``expression`` into number, operator and parenthesis tokens.

    Whitespace is ignored and digits and dots are gathered into numbers;
    any other character that is not an operator or parenthesis is dropped.
    """
    tokens: list[Token] = []
    digits: list[str] = []

    for char in expression:
        if char.isspace():
            continue
        if char.isdecimal() or char == ".":
            digits.append(char)
            continue

        if digits:
            tokens.append(_number_token("".join(digits)))
            digits.clear()

        if is_operator(char):
            tokens.append(
                Token(
                    char,
                    TokenType.OPERATOR,
                    get_precedence(char),
                    get_associativity(char),
                )
            )
        elif char == "(":
            tokens.append(Token(char, TokenType.LEFT_PAREN))
        elif char == ")":
            tokens.append(Token(char, TokenType.RIGHT_PAREN))

    if digits:
        tokens.append(_number_token("".join(digits)))
    return tokens


def shunting_yard(tokens: Iterable[Token]) -> list[Token]:
    """Convert infix ``tokens`` to postfix (reverse Polish) order."""
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.type is TokenType.OPERATOR:
            while stack and stack[-1].type is TokenType.OPERATOR and (
                stack[-1].precedence > token.precedence
                or (
                    stack[-1].precedence == token.precedence
                    and token.associativity == "left"
                )
            ):
                output.append(stack.pop())
            stack.append(token)
        elif token.type is TokenType.LEFT_PAREN:
            stack.append(token)
        elif token.type is TokenType.RIGHT_PAREN:
            while stack and stack[-1].type is not TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()

    output.extend(reversed(stack))
    return output


def evaluate(postfix: Iterable[Token]) -> float:
    """Evaluate a postfix token sequence and return the result.

    Raises ValueError for a number that cannot be parsed or an unknown operator.
    An empty expression evaluates to 0.
    """
    values: list[float] = []
    for token in postfix:
        if token.type is TokenType.NUMBER:
            try:
                values.append(float(token.value))
            except ValueError as exc:
                raise ValueError(f"Error parsing number {token.value!r}: {exc}") from exc
        elif token.type is TokenType.OPERATOR:
            try:
                operation = _OPERATIONS[token.value]
            except KeyError:
                raise ValueError(f"Unknown operator {token.value!r}") from None
            values.append(apply_operator(values, operation))
    return values.pop() if values else 0.0