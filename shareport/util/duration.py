"""Go-style duration strings.

The guest link API exchanges durations in the format produced by Go's
``time.Duration.String`` (``"24h0m0s"``, ``"876000h0m0s"``, ``"1m30s"``,
``"1.5s"``). This module converts between that format and ``timedelta``.
Resolution is one microsecond; nanosecond components are truncated.
"""

import re
from datetime import timedelta
from fractions import Fraction

from shareport.util.error import DurationParseError

_UNIT_MICROSECONDS: dict[str, Fraction] = {
    "ns": Fraction(1, 1000),
    "us": Fraction(1),
    "µs": Fraction(1),  # micro sign
    "μs": Fraction(1),  # greek mu
    "ms": Fraction(1000),
    "s": Fraction(1_000_000),
    "m": Fraction(60_000_000),
    "h": Fraction(3_600_000_000),
}

_COMPONENT = r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|h|m|s)"
_DURATION_PATTERN = re.compile(rf"^([-+]?)((?:{_COMPONENT})+)$")
_COMPONENT_PATTERN = re.compile(_COMPONENT)

# Go durations are int64 nanoseconds
_MAX_NANOSECONDS = 2**63 - 1

_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration string.

    Args:
        value: Duration such as ``"24h0m0s"``, ``"90m"`` or ``"-1.5h"``

    Returns:
        Equivalent timedelta

    Raises:
        DurationParseError: If the string is not a valid duration
    """
    if value in ("0", "+0", "-0"):
        return timedelta(0)

    match = _DURATION_PATTERN.fullmatch(value)
    if not match:
        raise DurationParseError(value)

    sign, body = match.group(1), match.group(2)
    total = Fraction(0)
    try:
        for number, unit in _COMPONENT_PATTERN.findall(body):
            total += Fraction(number) * _UNIT_MICROSECONDS[unit]
    except ValueError:
        # Digit strings past the int conversion limit
        raise DurationParseError(value)

    limit = _MAX_NANOSECONDS + 1 if sign == "-" else _MAX_NANOSECONDS
    if total * 1000 > limit:
        raise DurationParseError(value)

    micros = int(total)  # truncates toward zero
    if sign == "-":
        micros = -micros
    return timedelta(microseconds=micros)


def _format_fraction(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Format a timedelta the way Go's ``Duration.String`` does.

    Args:
        duration: Duration to format

    Returns:
        Go-style duration string, e.g. ``"720h0m0s"``
    """
    micros = duration // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < _MICROS_PER_SECOND:
        if micros < 1000:
            return f"{sign}{micros}µs"
        return f"{sign}{_format_fraction(micros // 1000, micros % 1000, 3)}ms"

    hours, rest = divmod(micros, _MICROS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROS_PER_MINUTE)
    seconds = _format_fraction(
        rest // _MICROS_PER_SECOND, rest % _MICROS_PER_SECOND, 6
    )

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"
