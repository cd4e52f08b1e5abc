import pytest

from sqlstamp._scan import Scanner


def test_empty():
    s = Scanner("")
    assert s.current() is None
    assert s.at_end()
    assert s.read_digits() is None
    s.advance()
    assert s.current() is None


def test_advance():
    s = Scanner("ab")
    assert s.current() == "a"
    s.advance()
    assert s.current() == "b"
    s.advance()
    assert s.current() is None
    assert s.at_end()


class TestReadDigits:

    @pytest.mark.parametrize(
        "text, expect, rest",
        [
            ("2012-03", (2012, 4), "-"),
            ("0600", (600, 4), None),
            ("7", (7, 1), None),
            ("000000", (0, 6), None),
            ("123456789012", (123456789012, 12), None),
            ("12:34", (12, 2), ":"),
        ],
    )
    def test_run(self, text, expect, rest):
        s = Scanner(text)
        assert s.read_digits() == expect
        assert s.current() == rest

    @pytest.mark.parametrize("text", ["", "-1", "x12", " 1", "١٢"])
    def test_no_digits(self, text):
        s = Scanner(text)
        assert s.read_digits() is None
        # nothing is consumed
        assert s.current() == (text[0] if text else None)

    def test_non_ascii_digits_end_the_run(self):
        s = Scanner("12٣4")
        assert s.read_digits() == (12, 2)
        assert s.current() == "٣"

    def test_consecutive_runs(self):
        s = Scanner("05:06")
        assert s.read_digits() == (5, 2)
        s.advance()
        assert s.read_digits() == (6, 2)
        assert s.at_end()


def test_repr():
    s = Scanner("2012")
    s.advance()
    assert repr(s) == "Scanner('2012', pos=1)"
