# The MIT License (MIT)
#
# Copyright (c) the sqlstamp authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

# Maintainer's notes:
#
# - Why are the value types all in one file?
#   - Flat is better than nested
#   - Timestamp and the native record types refer to each other
# - Parsing lives in _parse.py and only produces plain fields.
#   Assembling the Timestamp happens here.
from __future__ import annotations

__version__ = "0.1.0"

import enum
from dataclasses import dataclass
from datetime import datetime as _datetime
from typing import TYPE_CHECKING, Any, no_type_check

from ._common import MAX_PRECISION, POW10, InvalidFormat, mk_fixed_tzinfo
from ._parse import timestamp_fields_from_text

__all__ = [
    "Timestamp",
    "NativeTimestamp",
    "ColumnType",
    "ColumnKind",
    "InvalidFormat",
]

# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__
_FIELDS = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "nanosecond",
    "tz_hour_offset",
    "tz_minute_offset",
    "precision",
    "with_tz",
)
_UNSIGNED_FIELDS = ("month", "day", "hour", "minute", "second")


class _ImmutableBase:
    __slots__ = ()

    # Immutable classes don't need to be copied
    @no_type_check
    def __copy__(self):
        return self

    @no_type_check
    def __deepcopy__(self, _):
        return self


if TYPE_CHECKING:
    from typing import final
else:

    def final(cls):

        def init_subclass_not_allowed(cls, **kwargs):  # pragma: no cover
            raise TypeError("Subclassing not allowed")

        cls.__init_subclass__ = init_subclass_not_allowed
        return cls


class ColumnKind(enum.Enum):
    """The datetime column types a driver can report"""

    DATE = "DATE"
    """Plain date and time, no fractional seconds or offset"""
    TIMESTAMP = "TIMESTAMP"
    TIMESTAMP_TZ = "TIMESTAMP WITH TIME ZONE"
    TIMESTAMP_LTZ = "TIMESTAMP WITH LOCAL TIME ZONE"


@dataclass(frozen=True)
class ColumnType:
    """A column's declared type: its kind and fractional-second precision

    Example
    -------
    >>> ColumnType(ColumnKind.TIMESTAMP_TZ, 6)
    ColumnType(kind=<ColumnKind.TIMESTAMP_TZ: 'TIMESTAMP WITH TIME ZONE'>, precision=6)
    """

    kind: ColumnKind
    precision: int = 0

    def rendering(self) -> tuple[int, bool]:
        """The ``(precision, with_tz)`` pair values of this type render with"""
        if self.kind is ColumnKind.TIMESTAMP:
            return self.precision, False
        elif self.kind in (ColumnKind.TIMESTAMP_TZ, ColumnKind.TIMESTAMP_LTZ):
            return self.precision, True
        else:
            return 0, False


@dataclass(frozen=True)
class NativeTimestamp:
    """The fixed-layout datetime record a database driver hands over.

    ``fsecond`` holds the fractional seconds in nanoseconds.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    fsecond: int
    tz_hour_offset: int
    tz_minute_offset: int


@final
class Timestamp(_ImmutableBase):
    """A date and time with a fractional-second precision
    and an optional fixed UTC offset.

    The nanosecond field always holds the full value. ``precision``
    only controls how many fractional digits are rendered.
    Fields are not checked against the calendar.

    Example
    -------
    >>> Timestamp(2012, 3, 4, 5, 6, 7)
    Timestamp(2012-03-04 05:06:07)
    >>> Timestamp(2012, 3, 4, 5, 6, 7, 890_123_456).with_precision(3)
    Timestamp(2012-03-04 05:06:07.890)
    >>> Timestamp(2012, 3, 4).with_offset_hm(-8, -45)
    Timestamp(2012-03-04 00:00:00 -08:45)
    """

    __slots__ = _FIELDS

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int
    tz_hour_offset: int
    tz_minute_offset: int
    precision: int
    with_tz: bool

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        _init(
            self,
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond,
            0,
            0,
            0,
            False,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def with_offset_seconds(self, total_seconds: int, /) -> Timestamp:
        """Attach a UTC offset given in seconds.

        Leftover seconds are dropped. The minute component gets
        the same sign as the hour component.

        Example
        -------
        >>> Timestamp(2012, 3, 4).with_offset_seconds(-(8 * 3600 + 45 * 60))
        Timestamp(2012-03-04 00:00:00 -08:45)
        """
        hours, minutes = divmod(abs(total_seconds) // 60, 60)
        if total_seconds < 0:
            hours, minutes = -hours, -minutes
        return self.replace(
            tz_hour_offset=hours, tz_minute_offset=minutes, with_tz=True
        )

    def with_offset_hm(
        self, hour_offset: int, minute_offset: int, /
    ) -> Timestamp:
        """Attach a UTC offset given as hours and minutes.

        Both components should have the same sign, e.g. ``(-8, -45)``
        for ``-08:45``.
        """
        return self.replace(
            tz_hour_offset=hour_offset,
            tz_minute_offset=minute_offset,
            with_tz=True,
        )

    def without_offset(self) -> Timestamp:
        """Mark the offset as absent. The stored offset fields are kept."""
        return self.replace(with_tz=False)

    def with_precision(self, precision: int, /) -> Timestamp:
        """Change how many fractional digits are rendered.
        The stored nanoseconds are unaffected."""
        return self.replace(precision=precision)

    def offset_total_seconds(self) -> int:
        """The UTC offset in seconds

        Example
        -------
        >>> Timestamp(2012, 3, 4).with_offset_hm(8, 45).offset_total_seconds()
        31500
        """
        return self.tz_hour_offset * 3600 + self.tz_minute_offset * 60

    def replace(self, **kwargs: Any) -> Timestamp:
        """Create a new instance with the given fields replaced

        Example
        -------
        >>> ts = Timestamp(2012, 3, 4, 5, 6, 7)
        >>> ts.replace(day=5, precision=2)
        Timestamp(2012-03-05 05:06:07.00)
        """
        if unknown := set(kwargs).difference(_FIELDS):
            raise TypeError(f"Unknown field(s): {', '.join(sorted(unknown))}")
        new = _object_new(Timestamp)
        _init(new, *(kwargs.get(f, getattr(self, f)) for f in _FIELDS))
        return new

    def format(self) -> str:
        """Format as ``YYYY-MM-DD HH:MM:SS[.fff] [±HH:MM]``

        The number of fractional digits follows ``precision``,
        the offset is only present if ``with_tz`` is set.
        Inverse of :meth:`parse`.

        Example
        -------
        >>> Timestamp(-123, 3, 4, 5, 6, 7, 123_000_000).replace(
        ...     precision=3
        ... ).with_offset_hm(-8, -45).format()
        '-123-03-04 05:06:07.123 -08:45'
        """
        s = (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if precision := self.precision:
            digits = self.nanosecond // POW10[MAX_PRECISION - precision]
            s += f".{digits:0{precision}d}"
        if self.with_tz:
            hours = self.tz_hour_offset
            minutes = self.tz_minute_offset
            sign = "-" if hours < 0 or (hours == 0 and minutes < 0) else "+"
            s += f" {sign}{abs(hours):02d}:{abs(minutes):02d}"
        return s

    @classmethod
    def parse(cls, s: str, /) -> Timestamp:
        """Parse a timestamp from text.

        Besides the output of :meth:`format`, compact digit runs
        (``20120304T050607``), a ``T`` separator, any number of fractional
        digits (truncated beyond nanoseconds), ``Z``, and offsets without
        a colon (``+0845``) are accepted.

        Raises :class:`InvalidFormat` if the text is malformed.

        Example
        -------
        >>> Timestamp.parse("20120304T050607.89+0845")
        Timestamp(2012-03-04 05:06:07.89 +08:45)
        """
        (
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanos,
            precision,
            offset,
        ) = timestamp_fields_from_text(s)
        self = _object_new(cls)
        _init(
            self,
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanos,
            0,
            0,
            precision,
            False,
        )
        if offset is not None:
            self = self.with_offset_hm(*offset)
        return self

    @classmethod
    def from_native(
        cls, record: NativeTimestamp, column_type: ColumnType, /
    ) -> Timestamp:
        """Create from a driver record and the column's declared type,
        which determines the precision and whether the offset is relevant.
        """
        precision, with_tz = column_type.rendering()
        self = _object_new(cls)
        _init(
            self,
            record.year,
            record.month,
            record.day,
            record.hour,
            record.minute,
            record.second,
            record.fsecond,
            record.tz_hour_offset,
            record.tz_minute_offset,
            precision,
            with_tz,
        )
        return self

    def to_native(self) -> NativeTimestamp:
        """Convert to the driver's record layout"""
        return NativeTimestamp(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
            self.tz_hour_offset,
            self.tz_minute_offset,
        )

    def py_datetime(self) -> _datetime:
        """Convert to a standard library :class:`~datetime.datetime`

        Nanoseconds are truncated to microseconds. The result is naive
        unless ``with_tz`` is set. Raises ``ValueError`` if the fields
        are out of range for the standard library.
        """
        if self.with_tz:
            tzinfo = mk_fixed_tzinfo(self.offset_total_seconds())
        else:
            tzinfo = None
        return _datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1_000,
            tzinfo,
        )

    @classmethod
    def from_py_datetime(
        cls, dt: _datetime, /, *, precision: int = 6
    ) -> Timestamp:
        """Create from a standard library :class:`~datetime.datetime`

        Aware datetimes keep their UTC offset, minus any seconds part.

        Example
        -------
        >>> Timestamp.from_py_datetime(datetime(2012, 3, 4, 5, 6, 7, 890_000))
        Timestamp(2012-03-04 05:06:07.890000)
        """
        if not isinstance(dt, _datetime):
            raise TypeError(f"Expected datetime, got {type(dt)!r}")
        self = cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            dt.microsecond * 1_000,
        ).with_precision(precision)
        if (offset := dt.utcoffset()) is not None:
            self = self.with_offset_seconds(int(offset.total_seconds()))
        return self

    __str__ = format

    def __repr__(self) -> str:
        return f"Timestamp({self})"

    def _astuple(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f) for f in _FIELDS)

    def __eq__(self, other: object) -> bool:
        """Compare all fields, including precision and stored offsets

        Example
        -------
        >>> Timestamp(2012, 3, 4) == Timestamp.parse("2012-03-04")
        True
        >>> Timestamp(2012, 3, 4) == Timestamp(2012, 3, 4).with_precision(1)
        False
        """
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __hash__(self) -> int:
        return hash(self._astuple())

    # Fields aren't bounded, so they can't be packed into a fixed layout
    @no_type_check
    def __reduce__(self):
        return _unpkl_ts, self._astuple()


# A separate unpickling function allows us to make backwards-compatible changes
# to the pickling format in the future
def _unpkl_ts(*args: Any) -> Timestamp:
    self = _object_new(Timestamp)
    _init(self, *args)
    return self


def _init(self: Timestamp, *values: Any) -> None:
    for name, value in zip(_FIELDS, values):
        if name == "with_tz":
            value = bool(value)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value)!r}")
        elif name in _UNSIGNED_FIELDS and value < 0:
            raise ValueError(f"{name} must not be negative: {value}")
        else:
            value = int(value)
        object.__setattr__(self, name, value)

    if not 0 <= self.nanosecond < 1_000_000_000:
        raise ValueError(f"nanosecond out of range: {self.nanosecond}")
    if not 0 <= self.precision <= MAX_PRECISION:
        raise ValueError(f"precision out of range: {self.precision}")


# We expose the public members in the root of the module.
# For clarity, we remove the "_pystamp" part from the names,
# since this is an implementation detail.
for name in __all__:
    member = locals()[name]
    if getattr(member, "__module__", "").startswith("sqlstamp."):
        member.__module__ = "sqlstamp"

# clear up loop variables so they don't leak into the namespace
del name
del member

_unpkl_ts.__module__ = "sqlstamp"
