"""Lectura de duraciones con formato "1h30m", "0.5h", "90s"."""

from __future__ import annotations

import re

import pandas as pd

from fit_tracker.errors import InvalidDurationError

_UNIT_NS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5
    "μs": 1_000,  # U+03BC
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT_RX = re.compile(r"([0-9]*)(?:\.([0-9]*))?(ns|us|µs|μs|ms|s|m|h)")

# Rango de pd.Timedelta (int64 en ns, sin NaT).
MAX_DURATION_NS = 2**63 - 1


def parse_duration(text: str) -> pd.Timedelta:
    """Parse a duration expression into a Timedelta.

    The expression is an optionally signed sequence of decimal numbers, each
    followed by a unit (ns, us, µs, ms, s, m, h), e.g. "1h30m" or "-1.5h".
    The bare string "0" is also accepted.

    Args:
        text: Raw duration string. Whitespace is not allowed.

    Returns:
        Parsed duration with nanosecond resolution.

    Raises:
        InvalidDurationError: If the text does not follow the grammar or
            does not fit in a Timedelta.
    """
    body = text
    sign = 1
    if body[:1] in ("-", "+"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body == "0":
        return pd.Timedelta(0)
    if not body:
        raise InvalidDurationError(f"invalid duration {text!r}")

    total_ns = 0
    pos = 0
    while pos < len(body):
        match = _COMPONENT_RX.match(body, pos)
        if match is None:
            raise InvalidDurationError(f"invalid duration {text!r}")
        whole, frac, unit = match.groups()
        if not whole and not frac:
            raise InvalidDurationError(f"invalid duration {text!r}")
        total_ns += _component_ns(whole, frac, _UNIT_NS[unit])
        if total_ns > MAX_DURATION_NS:
            raise InvalidDurationError(f"duration out of range {text!r}")
        pos = match.end()

    return pd.Timedelta(sign * total_ns, unit="ns")


def _component_ns(whole: str, frac: str | None, unit_ns: int) -> int:
    """Convierte "<entero>.<fracción>" en nanosegundos (trunca el resto)."""
    ns = int(whole or "0") * unit_ns
    if frac:
        ns += int(frac) * unit_ns // 10 ** len(frac)
    return ns
