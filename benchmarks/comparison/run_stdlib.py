# See the README for how to run this
import pyperf

runner = pyperf.Runner()

runner.timeit(
    "parse",
    "f('2020-04-05 22:04:00.123456-04:00')",
    setup="from datetime import datetime; f = datetime.fromisoformat",
)

runner.timeit(
    "parse compact",
    "f('2020-04-05 22:04:00.123456-0400', '%Y-%m-%d %H:%M:%S.%f%z')",
    setup="from datetime import datetime; f = datetime.strptime",
)

runner.timeit(
    "format",
    "d.isoformat(' ')",
    setup="from datetime import datetime, timedelta, timezone; "
    "d = datetime(2020, 4, 5, 22, 4, 0, 123_456, "
    "timezone(timedelta(hours=-4)))",
)

runner.timeit(
    "new timestamp",
    "datetime(2020, 2, 29, 12, 30)",
    setup="from datetime import datetime",
)
