"""Grouping-aware left-to-right evaluator.

Reduces a flat token sequence to one integer with a cursor. Each ``e`` pushes
the enclosing level's pending accumulator and operator onto an explicit stack
and each ``f`` pops it, so nesting depth is bounded only by memory. Inside a
level operators are applied strictly in encounter order: ``3a4c2`` is
``(3 + 4) * 2``, never ``3 + (4 * 2)``.

Division truncates toward zero. Every intermediate result must fit the signed
integer range of the configured width.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from lettercalc.errors import (
    DivisionByZero,
    EmptyExpression,
    NumberOverflow,
    UnexpectedToken,
    UnmatchedBracket,
)
from lettercalc.models import OPERATORS, Token, TokenKind
from lettercalc.tokenizer import int_range


def divide_toward_zero(lhs: int, rhs: int) -> int:
    """Integer division truncating toward zero (``-7 / 2 == -3``)."""
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


_APPLY: dict[TokenKind, Callable[[int, int], int]] = {
    TokenKind.PLUS: operator.add,
    TokenKind.MINUS: operator.sub,
    TokenKind.TIMES: operator.mul,
    TokenKind.DIVIDE: divide_toward_zero,
}


@dataclass
class _Level:
    """Fold state of one grouping level.

    ``acc`` is None until the level's first operand is read. ``pending`` is
    the operator waiting for its right operand. ``opened_by`` is the OPEN
    token of a group, None for the top level.
    """

    acc: Optional[int] = None
    pending: Optional[Token] = None
    opened_by: Optional[Token] = None

    @property
    def wants_operand(self) -> bool:
        return self.acc is None or self.pending is not None


class _Reducer:
    """Cursor over one token sequence. Used once per evaluate() call."""

    def __init__(self, tokens: Sequence[Token], int_bits: int) -> None:
        self.tokens = tokens
        self.index = 0
        self.int_bits = int_bits
        self.min_value, self.max_value = int_range(int_bits)

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def reduce(self) -> int:
        """Fold every level until the sequence is exhausted."""
        level = _Level()
        outer: list[_Level] = []

        while True:
            token = self.peek()

            if level.wants_operand:
                if token is not None and token.kind == TokenKind.OPEN:
                    self.advance()
                    outer.append(level)
                    level = _Level(opened_by=token)
                    continue
                self.advance_operand(level, token, nested=bool(outer))
                continue

            if token is None:
                if outer:
                    raise UnmatchedBracket(
                        f"Group opened at position {level.opened_by.position} is never closed",
                        level.opened_by.position,
                    )
                return level.acc

            if token.kind == TokenKind.CLOSE:
                if not outer:
                    raise UnmatchedBracket(
                        f"Close at position {token.position} has no matching open",
                        token.position,
                    )
                self.advance()
                value = level.acc
                level = outer.pop()
                self.fold(level, value)
                continue

            if token.kind not in OPERATORS:
                raise UnexpectedToken(
                    f"Expected an operator at position {token.position}, found {token}",
                    token.position,
                )
            self.advance()
            level.pending = token

    def advance_operand(self, level: _Level, token: Optional[Token], nested: bool) -> None:
        """Consume a NUMBER in operand position and fold it into ``level``."""
        after = level.pending

        if token is None:
            if after is not None:
                raise UnexpectedToken(
                    f"Operator {after} at position {after.position} has no right operand",
                    after.position,
                )
            raise EmptyExpression("Expected a number or a group, found end of input")

        if token.kind == TokenKind.NUMBER:
            self.advance()
            self.fold(level, token.value)
            return

        if token.kind == TokenKind.CLOSE and after is None:
            if not nested:
                raise UnmatchedBracket(
                    f"Close at position {token.position} has no matching open",
                    token.position,
                )
            raise EmptyExpression(f"Empty group closed at position {token.position}", token.position)

        raise UnexpectedToken(
            f"Expected a number or a group at position {token.position}, found {token}",
            token.position,
        )

    def fold(self, level: _Level, value: int) -> None:
        if level.pending is None:
            level.acc = value
        else:
            level.acc = self.apply(level.pending, level.acc, value)
            level.pending = None

    def apply(self, op: Token, lhs: int, rhs: int) -> int:
        if op.kind == TokenKind.DIVIDE and rhs == 0:
            raise DivisionByZero(f"Division by zero at position {op.position}", op.position)
        result = _APPLY[op.kind](lhs, rhs)
        if not self.min_value <= result <= self.max_value:
            raise NumberOverflow(
                f"Result of {lhs} {op.kind.value} {rhs} at position {op.position} "
                f"does not fit in {self.int_bits} bits",
                op.position,
            )
        return result


def evaluate(tokens: Sequence[Token], int_bits: int = 64) -> int:
    """Reduce a token sequence to a single integer.

    Raises:
        EmptyExpression: No operand at all, at top level or inside a group.
        UnexpectedToken: Operator where an operand belongs or vice versa.
        UnmatchedBracket: Open without close, or a stray close.
        DivisionByZero: Right operand of a division is zero.
        NumberOverflow: An intermediate result leaves the signed range.
    """
    return _Reducer(tokens, int_bits).reduce()
