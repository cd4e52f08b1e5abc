"""
Stress test parsing and formatting from many threads at once.

Note this isn't a unit test: it's only meaningful on a free-threaded build.
"""

import sys
import time
from threading import Thread

from sqlstamp import InvalidFormat, Timestamp

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 2_000
TEXT_SAMPLE = [
    "2012",
    "20120304",
    "2012-03-04",
    "2012-03-04 05:06:07",
    "20120304T050607",
    "2012-03-04T05:06:07.8",
    "2012-03-04 05:06:07.890123456",
    "2012-03-04 05:06:07.8901234567",
    "2012-03-04 05:06:07Z",
    "2012-03-04 05:06:07 +08:45",
    "2012-03-04 05:06:07-0845",
    "-123-03-04 05:06:07.123 -08:45",
    "2012-03-04 05:06:07+",
    "2012-03-04X",
    "2012-03-04 1234",
]
assert (
    len(TEXT_SAMPLE) % NUM_THREADS
), "Text sample should not be evenly divisible by number of threads"
TEXTS = TEXT_SAMPLE * (NUM_THREADS * NUM_ITERATIONS)

# Results computed up front, single-threaded
EXPECTED = {}
for text in TEXT_SAMPLE:
    try:
        EXPECTED[text] = str(Timestamp.parse(text))
    except InvalidFormat:
        EXPECTED[text] = None


def parse_and_format(texts):
    """Parse each text and check the result against the expected one"""
    for text in texts:
        try:
            result = str(Timestamp.parse(text))
        except InvalidFormat:
            result = None
        assert result == EXPECTED[text], text


def main(func):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(TEXTS[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main(parse_and_format)
