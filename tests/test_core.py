"""Tests for the calc()/run() entry points."""

import pytest

from lettercalc import calc, run
from lettercalc.core import SAMPLES
from lettercalc.errors import ExpressionError, NumberOverflow


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("LETTERCALC_INT_BITS", raising=False)
    monkeypatch.delenv("LETTERCALC_OUTPUT", raising=False)


# --- calc() ---

@pytest.mark.parametrize("text, expected", SAMPLES)
def test_samples(text, expected):
    assert calc(text) == expected


def test_calc_raises_value_error():
    with pytest.raises(ValueError):
        calc("3a")


def test_calc_errors_share_base_class():
    for text in ("3g", "e3", "4d0", "", "3af", f"{2**64}"):
        with pytest.raises(ExpressionError):
            calc(text)


def test_calc_bits_argument():
    with pytest.raises(NumberOverflow):
        calc("100a100", int_bits=8)


def test_calc_bits_from_environment(monkeypatch):
    monkeypatch.setenv("LETTERCALC_INT_BITS", "8")
    with pytest.raises(NumberOverflow):
        calc("100a100")


def test_calc_rejects_bad_width():
    with pytest.raises(ValueError):
        calc("1", int_bits=4)


# --- run() ---

def test_run_success():
    result = run("3ae4c66fb32")
    assert result.ok
    assert result.value == 235
    assert result.error is None


def test_run_captures_error():
    result = run("e3a2")
    assert not result.ok
    assert result.value is None
    assert result.error.kind == "UnmatchedBracket"
    assert result.error.stage == "parse"
    assert result.error.position == 0


@pytest.mark.parametrize("text, kind, stage", [
    ("3g2", "UnrecognizedCharacter", "lex"),
    (str(2**63), "NumberOverflow", "lex"),
    (f"{2**62}c2", "NumberOverflow", "eval"),
    ("4d0", "DivisionByZero", "eval"),
    ("", "EmptyExpression", "parse"),
    ("3ab2", "UnexpectedToken", "parse"),
    ("3a2f", "UnmatchedBracket", "parse"),
])
def test_run_error_kinds(text, kind, stage):
    result = run(text)
    assert result.error.kind == kind
    assert result.error.stage == stage


def test_run_deep_nesting():
    depth = 5000
    assert run("e" * depth + "5" + "f" * depth).value == 5
    result = run("e" * depth + "5")
    assert result.error.kind == "UnmatchedBracket"
    assert result.error.position == depth - 1


def test_run_to_dict():
    assert run("3a2c4").to_dict() == {"expression": "3a2c4", "ok": True, "value": 20}
    d = run("4d0").to_dict()
    assert d["ok"] is False
    assert d["error"]["kind"] == "DivisionByZero"
    assert d["error"]["position"] == 1
    assert "value" not in d
