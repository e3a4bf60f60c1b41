"""Exception types raised by the tokenizer and evaluator.

Every error is an ExpressionError (and so a ValueError) carrying the stage it
was detected in and, where known, the character offset of the culprit.
"""

from __future__ import annotations

from typing import Optional

from lettercalc.models import ErrorInfo


class ExpressionError(ValueError):
    """Base class for all input errors."""

    stage = "parse"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_info(self) -> ErrorInfo:
        return ErrorInfo(
            kind=self.kind,
            message=self.message,
            stage=self.stage,
            position=self.position,
        )


class UnrecognizedCharacter(ExpressionError):
    """Input contains a character outside 0-9 and a-f."""

    stage = "lex"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Unrecognized character {char!r} at position {position}", position)
        self.char = char


class NumberOverflow(ExpressionError):
    """A literal or an intermediate result left the signed integer range."""

    def __init__(self, message: str, position: Optional[int] = None, stage: str = "eval") -> None:
        super().__init__(message, position)
        self.stage = stage


class UnexpectedToken(ExpressionError):
    pass


class UnmatchedBracket(ExpressionError):
    pass


class DivisionByZero(ExpressionError, ZeroDivisionError):
    """Right operand of a division evaluated to zero."""

    stage = "eval"


class EmptyExpression(ExpressionError):
    pass
