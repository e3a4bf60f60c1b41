"""Tests for the letter-notation tokenizer."""

import pytest

from lettercalc.errors import NumberOverflow, UnrecognizedCharacter
from lettercalc.models import Token, TokenKind
from lettercalc.tokenizer import int_range, tokenize


def kinds(text: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(text)]


# --- Numbers ---

def test_single_number():
    assert tokenize("7") == (Token(TokenKind.NUMBER, 7),)


def test_digit_run_is_one_token():
    assert tokenize("500a10") == (
        Token(TokenKind.NUMBER, 500),
        Token(TokenKind.PLUS),
        Token(TokenKind.NUMBER, 10),
    )


def test_leading_zeros():
    assert tokenize("007")[0].value == 7


def test_largest_64_bit_literal():
    top = str(2**63 - 1)
    assert tokenize(top)[0].value == 2**63 - 1


def test_literal_overflow():
    with pytest.raises(NumberOverflow) as exc:
        tokenize("1a" + str(2**63))
    assert exc.value.position == 2
    assert exc.value.stage == "lex"


def test_literal_overflow_narrow_width():
    assert tokenize("127", int_bits=8)[0].value == 127
    with pytest.raises(NumberOverflow):
        tokenize("128", int_bits=8)


def test_int_range():
    assert int_range(8) == (-128, 127)
    assert int_range(64) == (-(2**63), 2**63 - 1)


# --- Letters ---

def test_every_letter():
    assert kinds("abcdef") == [
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.TIMES,
        TokenKind.DIVIDE,
        TokenKind.OPEN,
        TokenKind.CLOSE,
    ]


def test_brackets_pass_through_unbalanced():
    """Well-formedness is the evaluator's job."""
    assert kinds("ee3") == [TokenKind.OPEN, TokenKind.OPEN, TokenKind.NUMBER]
    assert kinds("3ff") == [TokenKind.NUMBER, TokenKind.CLOSE, TokenKind.CLOSE]


def test_positions():
    assert [t.position for t in tokenize("12a3e45f")] == [0, 2, 3, 4, 5, 7]


def test_token_text():
    assert [t.letter for t in tokenize("12ae")] == ["12", "a", "e"]


def test_every_kind_has_a_letter():
    assert "".join(t.letter for t in tokenize("abcdef")) == "abcdef"


# --- Whitespace and unknown characters ---

def test_empty_input():
    assert tokenize("") == ()


def test_surrounding_whitespace_is_trimmed():
    tokens = tokenize("  3a2\n")
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.PLUS, TokenKind.NUMBER]
    assert [t.position for t in tokens] == [2, 3, 4]


def test_interior_whitespace_rejected():
    with pytest.raises(UnrecognizedCharacter) as exc:
        tokenize("3 a2")
    assert exc.value.char == " "
    assert exc.value.position == 1


@pytest.mark.parametrize("text, char, position", [
    ("3g2", "g", 1),
    ("3A2", "A", 1),
    ("3+2", "+", 1),
    ("1.5", ".", 1),
    ("٣", "٣", 0),
])
def test_unrecognized_characters(text, char, position):
    with pytest.raises(UnrecognizedCharacter) as exc:
        tokenize(text)
    assert exc.value.char == char
    assert exc.value.position == position
    assert exc.value.stage == "lex"
