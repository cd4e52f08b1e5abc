from typing import NamedTuple, NoReturn

from ._common import MAX_PRECISION, POW10, InvalidFormat, Nanos
from ._scan import Scanner

_TYPE_NAME = "Timestamp"


class _ParseFailed(Exception):
    pass


def _parse_err(s: str) -> NoReturn:
    raise InvalidFormat(_TYPE_NAME, s) from None


_is_sep = " T".__contains__


class TimestampFields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: Nanos
    precision: int
    # None if the text has no offset. "Z" gives (0, 0)
    offset: tuple[int, int] | None


def _digits(s: Scanner) -> tuple[int, int]:
    if (run := s.read_digits()) is None:
        raise _ParseFailed()
    return run


def timestamp_fields_from_text(text: str) -> TimestampFields:
    """Decode the relaxed timestamp format in a single forward pass.

    Accepted layouts include ``2012``, ``20120304``, ``2012-03-04``,
    ``2012-03-04 05:06:07``, ``20120304T050607``, with an optional
    fraction of any length (truncated to nanoseconds)
    and an optional ``Z``, ``±HH:MM`` or ``±HHMM`` offset, which may be
    preceded by a single space.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text)!r}")
    try:
        return _fields(Scanner(text))
    # ValueError covers int() refusing absurdly long digit runs
    except (_ParseFailed, ValueError):
        _parse_err(text)


def _fields(s: Scanner) -> TimestampFields:
    negative = s.current() == "-"
    if negative:
        s.advance()

    year, _ = _digits(s)
    month = day = 1
    c = s.current()
    if c is None or _is_sep(c):
        if year > 10000:  # YYYYMMDD
            day = year % 100
            month = (year // 100) % 100
            year //= 10000
    elif c == "-":
        s.advance()
        month, _ = _digits(s)
        if s.current() == "-":
            s.advance()
            day, _ = _digits(s)
    else:
        raise _ParseFailed()

    if negative:
        year = -year

    if s.at_end():
        return TimestampFields(year, month, day, 0, 0, 0, 0, 0, None)

    if not _is_sep(s.current()):  # type: ignore[arg-type]
        raise _ParseFailed()
    s.advance()

    hour, hour_digits = _digits(s)
    minute = second = 0
    if s.current() == ":":
        s.advance()
        minute, _ = _digits(s)
        if s.current() == ":":
            s.advance()
            second, _ = _digits(s)
    elif hour_digits == 6:  # HHMMSS
        second = hour % 100
        minute = (hour // 100) % 100
        hour //= 10000
    else:
        raise _ParseFailed()

    nanos = 0
    precision = 0
    if s.current() == ".":
        s.advance()
        frac, ndigits = _digits(s)
        if ndigits <= MAX_PRECISION:
            nanos = frac * POW10[MAX_PRECISION - ndigits]
            precision = ndigits
        else:
            # truncate, don't round
            nanos = frac // 10 ** (ndigits - MAX_PRECISION)
            precision = MAX_PRECISION

    if s.current() == " ":
        s.advance()

    offset: tuple[int, int] | None = None
    sign = s.current()
    if sign == "+" or sign == "-":
        s.advance()
        tz_hour, _ = _digits(s)
        if s.current() == ":":
            s.advance()
            tz_minute, _ = _digits(s)
        else:  # HHMM
            tz_hour, tz_minute = divmod(tz_hour, 100)
        if sign == "-":
            tz_hour, tz_minute = -tz_hour, -tz_minute
        offset = (tz_hour, tz_minute)
    elif sign == "Z":
        s.advance()
        offset = (0, 0)

    if not s.at_end():
        raise _ParseFailed()

    return TimestampFields(
        year, month, day, hour, minute, second, nanos, precision, offset
    )
