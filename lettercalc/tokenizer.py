"""Tokenizer for the letter notation.

Turns a raw string such as ``3ae4c66fb32`` into a flat tuple of Tokens.
Leading/trailing whitespace is trimmed; anything else that is not an ASCII
digit or one of the letters a-f is rejected.
"""

from __future__ import annotations

from lettercalc.errors import NumberOverflow, UnrecognizedCharacter
from lettercalc.models import LETTERS, Token, TokenKind

_DIGITS = "0123456789"


def int_range(int_bits: int) -> tuple[int, int]:
    """Inclusive (min, max) of a signed integer of the given width."""
    return -(1 << (int_bits - 1)), (1 << (int_bits - 1)) - 1


def tokenize(text: str, int_bits: int = 64) -> tuple[Token, ...]:
    """Scan ``text`` left to right into tokens.

    Args:
        text: Expression in letter notation.
        int_bits: Width of the signed integer range literals must fit in.

    Returns:
        Tuple of tokens in source order.

    Raises:
        UnrecognizedCharacter: For any character outside 0-9 and a-f.
        NumberOverflow: For a digit run larger than the signed maximum.
    """
    _, max_value = int_range(int_bits)
    start = len(text) - len(text.lstrip())
    end = len(text.rstrip())

    tokens: list[Token] = []
    pos = start
    while pos < end:
        ch = text[pos]

        if ch in _DIGITS:
            run_start = pos
            while pos < end and text[pos] in _DIGITS:
                pos += 1
            value = int(text[run_start:pos])
            if value > max_value:
                raise NumberOverflow(
                    f"Number {text[run_start:pos]} at position {run_start} "
                    f"does not fit in {int_bits} bits",
                    run_start,
                    stage="lex",
                )
            tokens.append(Token(TokenKind.NUMBER, value, run_start))
            continue

        kind = LETTERS.get(ch)
        if kind is None:
            raise UnrecognizedCharacter(ch, pos)
        tokens.append(Token(kind, None, pos))
        pos += 1

    return tuple(tokens)
