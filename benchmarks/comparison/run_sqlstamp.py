# See the README for how to run this
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "parse",
    "f('2020-04-05 22:04:00.123456 -04:00')",
    setup="from sqlstamp import Timestamp; f = Timestamp.parse",
)

runner.timeit(
    "parse compact",
    "f('20200405T220400.123456-0400')",
    setup="from sqlstamp import Timestamp; f = Timestamp.parse",
)

runner.timeit(
    "format",
    "ts.format()",
    setup="from sqlstamp import Timestamp; "
    "ts = Timestamp(2020, 4, 5, 22, 4, 0, 123_456_000)"
    ".replace(precision=6).with_offset_hm(-4, 0)",
)

runner.timeit(
    "new timestamp",
    "Timestamp(2020, 2, 29, 12, 30)",
    setup="from sqlstamp import Timestamp",
)
