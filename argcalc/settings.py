"""Runtime settings for argcalc, read from the environment.

    ARGCALC_BITS     signed integer width (2..64, default 64)
    ARGCALC_EXPLAIN  "1"/"true"/"yes" to render stage tables on stderr

Command-line options override the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from argcalc.arithmetic import IntBounds

DEFAULT_BITS = 64
MAX_BITS = 64
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    bits: int = DEFAULT_BITS
    explain: bool = False

    @property
    def bounds(self) -> IntBounds:
        return IntBounds.for_bits(self.bits)


def _parse_bits(raw: str) -> int:
    try:
        bits = int(raw)
    except ValueError:
        raise ValueError(f"integer width must be a whole number, got {raw!r}") from None
    if not 2 <= bits <= MAX_BITS:
        raise ValueError(f"integer width must be between 2 and {MAX_BITS}, got {bits}")
    return bits


def load_settings(
    bits: Optional[int] = None,
    explain: Optional[bool] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build Settings from explicit overrides, falling back to the environment.

    Args:
        bits: Integer width; defaults to ARGCALC_BITS or 64.
        explain: Render stage tables; defaults to ARGCALC_EXPLAIN.
        env: Environment mapping, os.environ when omitted.

    Raises:
        ValueError: the integer width is not a whole number in 2..64.
    """
    env = os.environ if env is None else env

    if bits is None:
        bits = _parse_bits(env.get("ARGCALC_BITS", str(DEFAULT_BITS)))
    else:
        bits = _parse_bits(str(bits))

    if explain is None:
        explain = env.get("ARGCALC_EXPLAIN", "").strip().lower() in _TRUTHY

    return Settings(bits=bits, explain=explain)
