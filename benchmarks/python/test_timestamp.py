import pickle

from sqlstamp import ColumnKind, ColumnType, NativeTimestamp, Timestamp


def test_new(benchmark):
    benchmark(Timestamp, 2020, 8, 24, 12, 30, 45, 123_456_789)


def test_hash(benchmark):
    ts = Timestamp(2020, 8, 24, 12, 30, 45)
    benchmark(hash, ts)


def test_format(benchmark):
    ts = Timestamp(2020, 8, 24, 12, 30, 45, 123_456_789).replace(
        precision=6
    ).with_offset_hm(-8, -45)
    benchmark(ts.format)


def test_parse(benchmark):
    benchmark(Timestamp.parse, "2020-08-24 12:30:45.123456 -08:45")


def test_parse_compact(benchmark):
    benchmark(Timestamp.parse, "20200824T123045.123456789+0845")


def test_parse_date_only(benchmark):
    benchmark(Timestamp.parse, "2020-08-24")


def test_with_offset_seconds(benchmark):
    ts = Timestamp(2020, 8, 24, 12, 30, 45)
    benchmark(ts.with_offset_seconds, -31_500)


def test_from_native(benchmark):
    record = NativeTimestamp(2020, 8, 24, 12, 30, 45, 123_456_789, 1, 0)
    column_type = ColumnType(ColumnKind.TIMESTAMP_TZ, 6)
    benchmark(Timestamp.from_native, record, column_type)


def test_pickle(benchmark):
    ts = Timestamp(2020, 8, 24, 12, 30, 45)
    benchmark(pickle.dumps, ts)
