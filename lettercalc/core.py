"""Library entry points: string in, integer (or tagged error) out."""

from __future__ import annotations

from typing import Optional

from lettercalc.errors import ExpressionError
from lettercalc.evaluator import evaluate
from lettercalc.models import EvalResult
from lettercalc.settings import check_int_bits, load_settings
from lettercalc.tokenizer import tokenize

# Inputs used by the `samples` command, with their expected values.
SAMPLES: list[tuple[str, int]] = [
    ("3a2c4", 20),
    ("32a2d2", 17),
    ("500a10b66c32", 14208),
    ("3ae4c66fb32", 235),
    ("3c4d2aee2a4c41fc4f", 990),
]


def _resolve_bits(int_bits: Optional[int]) -> int:
    if int_bits is None:
        return load_settings().int_bits
    return check_int_bits(int_bits)


def calc(text: str, int_bits: Optional[int] = None) -> int:
    """Evaluate an expression in letter notation.

    Args:
        text: The expression, e.g. ``"3a2c4"``.
        int_bits: Signed integer width. None uses LETTERCALC_INT_BITS (64).

    Raises:
        ExpressionError: One of its subclasses for any invalid input.
    """
    bits = _resolve_bits(int_bits)
    return evaluate(tokenize(text, bits), bits)


def run(text: str, int_bits: Optional[int] = None) -> EvalResult:
    """Evaluate an expression, capturing input errors in the result."""
    bits = _resolve_bits(int_bits)
    try:
        value = evaluate(tokenize(text, bits), bits)
    except ExpressionError as e:
        return EvalResult(expression=text, error=e.to_info())
    return EvalResult(expression=text, value=value)
