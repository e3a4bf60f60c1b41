"""lettercalc — evaluator for arithmetic written with letter operators.

a, b, c, d are add/subtract/multiply/divide; e and f open and close a group.
Operators apply strictly left to right within a group, so ``3a2c4`` is
``(3 + 2) * 4 = 20``.

Usage:
    python -m lettercalc eval 3a2c4                  # Evaluate expressions
    python -m lettercalc eval 3ae4c66fb32 --json     # JSON output
    python -m lettercalc tokens 3ae4c66fb32          # Show the token stream
    python -m lettercalc samples                     # Run the sample inputs
"""

from lettercalc.core import calc, run
from lettercalc.evaluator import evaluate
from lettercalc.tokenizer import tokenize

__all__ = ["calc", "run", "evaluate", "tokenize"]
