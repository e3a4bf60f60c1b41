"""Environment-driven defaults for lettercalc.

    LETTERCALC_INT_BITS  signed integer width (default 64)
    LETTERCALC_OUTPUT    default CLI output format: text or json (default text)

CLI options take precedence over these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

MIN_INT_BITS = 8
MAX_INT_BITS = 1024


class OutputFormat(str, Enum):
    """CLI output formats."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class Settings:
    int_bits: int = 64
    output: OutputFormat = OutputFormat.TEXT


def check_int_bits(bits: int) -> int:
    """Validate an integer width, returning it unchanged."""
    if not MIN_INT_BITS <= bits <= MAX_INT_BITS:
        raise ValueError(f"Integer width must be between {MIN_INT_BITS} and {MAX_INT_BITS} bits, got {bits}")
    return bits


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: If a variable is set to an unusable value.
    """
    env = os.environ if env is None else env

    raw_bits = env.get("LETTERCALC_INT_BITS", "").strip()
    if raw_bits:
        try:
            bits = int(raw_bits)
        except ValueError:
            raise ValueError(f"LETTERCALC_INT_BITS must be an integer, got {raw_bits!r}") from None
        check_int_bits(bits)
    else:
        bits = Settings.int_bits

    raw_output = env.get("LETTERCALC_OUTPUT", "").strip().lower()
    if raw_output:
        try:
            output = OutputFormat(raw_output)
        except ValueError:
            raise ValueError(f"LETTERCALC_OUTPUT must be 'text' or 'json', got {raw_output!r}") from None
    else:
        output = Settings.output

    return Settings(int_bits=bits, output=output)
