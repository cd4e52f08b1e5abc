from datetime import timedelta as _timedelta, timezone as _timezone
from functools import lru_cache

Nanos = int  # 0-999_999_999
MAX_PRECISION = 9

# POW10[n] == 10**n, for scaling fractional digits to nanoseconds
POW10 = tuple(10**n for n in range(MAX_PRECISION + 1))


class InvalidFormat(ValueError):
    """A string could not be parsed as the given type"""

    def __init__(self, type_name: str, text: str) -> None:
        super().__init__(f"Invalid format for {type_name}: {text!r}")
        self.type_name = type_name
        self.text = text

    def __reduce__(self):
        return type(self), (self.type_name, self.text)


# We cache fixed-offset tzinfo objects to avoid creating multiple
# identical ones.
# It's very common to only have whole-hour offsets, so this helps a lot.
@lru_cache
def mk_fixed_tzinfo(secs: int, /) -> _timezone:
    return _timezone(_timedelta(seconds=secs))
