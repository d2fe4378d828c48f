"""Parsing and compact rendering of time durations."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,  # micro sign
    "\u03bcs": 1_000,  # Greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_MAX_NANOS = (1 << 63) - 1
_PART = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _invalid(text: str) -> ValueError:
    return ValueError(f'time: invalid duration "{text}"')


def _parse_nanos(text: str) -> int:
    rest = text
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise _invalid(text)

    total = 0
    while rest:
        match = _PART.match(rest)
        int_digits, frac_digits, unit = match.group(1), match.group(2) or "", match.group(3)
        if not int_digits and not frac_digits:
            raise _invalid(text)
        if not unit:
            raise ValueError(f'time: missing unit in duration "{text}"')
        scale = _NANOS_PER_UNIT.get(unit)
        if scale is None:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{text}"')
        total += int(int_digits or "0") * scale
        if frac_digits:
            total += int(Fraction(int(frac_digits), 10 ** len(frac_digits)) * scale)
        if total > _MAX_NANOS + (1 if negative else 0):
            raise _invalid(text)
        rest = rest[match.end():]

    return -total if negative else total


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"-1.5h"`` or ``"2h45m"``.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
    A bare ``"0"`` is accepted; any other number needs a unit. Raises
    ``ValueError`` on malformed input.
    """
    nanos = _parse_nanos(text)
    return timedelta(microseconds=round(Fraction(nanos, 1000)))


def parse_duration_loose(text: str) -> timedelta:
    """Like :func:`parse_duration`, but also accepts a trailing ``d``/``D`` for days."""
    if len(text) > 1 and text[-1] in "dD":
        return parse_duration(text[:-1] + "h") * 24
    return parse_duration(text)


def short_age(seconds: float | timedelta) -> str:
    """Render a duration as a single magnitude: ``"45s"``, ``"5m"``, ``"3h"``, ``"12d"``."""
    if isinstance(seconds, timedelta):
        seconds = seconds.total_seconds()
    if seconds < _MINUTE:
        return f"{int(seconds)}s"
    if seconds < _HOUR:
        return f"{int(seconds / _MINUTE)}m"
    if seconds < _DAY:
        return f"{int(seconds / _HOUR)}h"
    return f"{int(seconds / _DAY)}d"