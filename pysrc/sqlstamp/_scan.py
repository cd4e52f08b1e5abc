"""A forward-only cursor over text, used by the parser."""

from __future__ import annotations

__all__ = ["Scanner"]

_is_digit = "0123456789".__contains__


class Scanner:
    """Index-based cursor over a string.

    The cursor only ever moves forward. :meth:`read_digits` reports the
    length of each digit run, so callers can tell ``0600`` from ``600``.

    Example
    -------
    >>> s = Scanner("2012-03")
    >>> s.read_digits()
    (2012, 4)
    >>> s.current()
    '-'
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str, /) -> None:
        self._text = text
        self._pos = 0

    def current(self) -> str | None:
        """The character under the cursor, or ``None`` at the end"""
        try:
            return self._text[self._pos]
        except IndexError:
            return None

    def advance(self) -> None:
        """Move past the current character (no-op at the end)"""
        if self._pos < len(self._text):
            self._pos += 1

    def read_digits(self) -> tuple[int, int] | None:
        """Consume a run of ASCII digits.

        Returns the value and the number of digits consumed,
        or ``None`` (consuming nothing) if no digit is under the cursor.
        """
        text = self._text
        start = end = self._pos
        size = len(text)
        while end < size and _is_digit(text[end]):
            end += 1
        if end == start:
            return None
        self._pos = end
        return int(text[start:end]), end - start

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def __repr__(self) -> str:
        return f"Scanner({self._text!r}, pos={self._pos})"
