import re
from datetime import timedelta

# Nanoseconds per unit, as accepted by Go's time.ParseDuration.
_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_COMPONENT = re.compile(r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")

_MAX_NANOSECONDS = (1 << 63) - 1

# Enough digits to cover the int64 nanosecond range; longer runs either
# overflow (integer part) or fall below nanosecond precision (fraction).
_MAX_DIGITS = 19


def parse_duration_ns(duration_str: str) -> int:
    """
    Parses a duration string like '1h30m', '1.5s' or '500ns' into nanoseconds.

    Accepts an optional sign followed by a sequence of decimal numbers, each
    with an optional fraction and a unit suffix ("ns", "us", "ms", "s", "m", "h").

    Raises:
        ValueError: If the string is not a valid duration.
    """
    original = duration_str
    s = duration_str
    if not s:
        raise ValueError(f'time: invalid duration "{original}"')

    negative = False
    if s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ValueError(f'time: invalid duration "{original}"')

    total = 0
    while s:
        match = _COMPONENT.match(s)
        int_part = match.group("int")
        frac_part = match.group("frac") or ""
        unit = match.group("unit")

        if not int_part and not frac_part:
            raise ValueError(f'time: invalid duration "{original}"')
        if not unit:
            raise ValueError(f'time: missing unit in duration "{original}"')
        if unit not in _UNITS:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{original}"')

        int_part = int_part.lstrip("0")
        if len(int_part) > _MAX_DIGITS:
            raise ValueError(f'time: invalid duration "{original}"')

        scale = _UNITS[unit]
        value = int(int_part or 0) * scale
        frac_part = frac_part[:_MAX_DIGITS]
        if frac_part:
            value += int(frac_part) * scale // 10 ** len(frac_part)

        total += value
        if total > _MAX_NANOSECONDS + (1 if negative else 0):
            raise ValueError(f'time: invalid duration "{original}"')

        s = s[match.end():]

    return -total if negative else total


def parse_duration(duration_str: str) -> timedelta:
    """Parses a duration string into a timedelta. Sub-microsecond values are truncated."""
    nanoseconds = parse_duration_ns(duration_str)
    duration = timedelta(microseconds=abs(nanoseconds) // 1_000)
    return -duration if nanoseconds < 0 else duration


def _format_fraction(whole: int, frac: int, digits: int) -> str:
    if not frac:
        return str(whole)
    return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")


def format_duration_ns(nanoseconds: int) -> str:
    """Formats nanoseconds the way Go prints a time.Duration, e.g. '168h0m0s'."""
    sign = "-" if nanoseconds < 0 else ""
    u = abs(nanoseconds)

    if u == 0:
        return "0s"

    if u < 1_000_000_000:
        # Sub-second durations use a smaller unit so there is a leading digit.
        if u < 1_000:
            return f"{sign}{u}ns"
        if u < 1_000_000:
            return f"{sign}{_format_fraction(*divmod(u, 1_000), 3)}µs"
        return f"{sign}{_format_fraction(*divmod(u, 1_000_000), 6)}ms"

    seconds, nanos = divmod(u, 1_000_000_000)
    minutes, seconds = divmod(seconds, 60)
    text = f"{_format_fraction(seconds, nanos, 9)}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return f"{sign}{text}"


def to_nanoseconds(duration: timedelta) -> int:
    return ((duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds) * 1_000


def format_duration(duration: timedelta) -> str:
    """Formats a timedelta the way Go prints a time.Duration, e.g. '168h0m0s'."""
    return format_duration_ns(to_nanoseconds(duration))
