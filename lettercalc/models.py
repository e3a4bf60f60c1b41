"""Data models for lettercalc.

TokenKind enum, Token, ErrorInfo, EvalResult — the typed structures that flow
through tokenizer → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TokenKind(str, Enum):
    """Token kinds of the letter notation."""

    NUMBER = "number"
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"
    OPEN = "open"
    CLOSE = "close"


# Source letter for every single-character token.
LETTERS: dict[str, TokenKind] = {
    "a": TokenKind.PLUS,
    "b": TokenKind.MINUS,
    "c": TokenKind.TIMES,
    "d": TokenKind.DIVIDE,
    "e": TokenKind.OPEN,
    "f": TokenKind.CLOSE,
}

_LETTER_OF: dict[TokenKind, str] = {kind: ch for ch, kind in LETTERS.items()}

OPERATORS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.TIMES, TokenKind.DIVIDE})


@dataclass(frozen=True)
class Token:
    """One classified unit of the input.

    ``value`` is set only for NUMBER tokens. ``position`` is the offset of the
    token's first character and is ignored by equality.
    """

    kind: TokenKind
    value: Optional[int] = None
    position: int = field(default=0, compare=False)

    @property
    def letter(self) -> str:
        """Source text of the token."""
        if self.kind == TokenKind.NUMBER:
            return str(self.value)
        return _LETTER_OF[self.kind]

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"{self.value}"
        return f"{self.kind.value}({self.letter})"


@dataclass
class ErrorInfo:
    """Description of a failed evaluation."""

    kind: str
    message: str
    stage: str = ""
    position: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "stage": self.stage,
            "position": self.position,
        }


@dataclass
class EvalResult:
    """Outcome of evaluating a single expression: a value or an error."""

    expression: str
    value: Optional[int] = None
    error: Optional[ErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d: dict = {"expression": self.expression, "ok": self.ok}
        if self.error:
            d["error"] = self.error.to_dict()
        else:
            d["value"] = self.value
        return d
