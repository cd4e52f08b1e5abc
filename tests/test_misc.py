import pickle
from pathlib import Path

import pytest

import sqlstamp
from sqlstamp import (
    ColumnKind,
    ColumnType,
    InvalidFormat,
    NativeTimestamp,
    Timestamp,
)


def test_exceptions():
    assert issubclass(InvalidFormat, ValueError)


def test_invalid_format_attributes():
    e = InvalidFormat("Timestamp", "2012-03-04X")
    assert e.type_name == "Timestamp"
    assert e.text == "2012-03-04X"
    assert str(e) == "Invalid format for Timestamp: '2012-03-04X'"


def test_invalid_format_pickles():
    e = InvalidFormat("Timestamp", "foo")
    loaded = pickle.loads(pickle.dumps(e))
    assert type(loaded) is InvalidFormat
    assert loaded.text == "foo"
    assert str(loaded) == str(e)


def test_version():
    from sqlstamp import __version__

    assert isinstance(__version__, str)


def test_no_attr_on_module():
    with pytest.raises((AttributeError, ImportError), match="DoesntExist"):
        from sqlstamp import DoesntExist  # type: ignore[attr-defined] # noqa


@pytest.mark.parametrize(
    "cls", [Timestamp, NativeTimestamp, ColumnType, ColumnKind, InvalidFormat]
)
def test_public_module_name(cls):
    assert cls.__module__ == "sqlstamp"


DOCS_INDEX = Path(__file__).parent.parent / "docs" / "index.rst"


@pytest.mark.parametrize("name", sqlstamp.__all__)
def test_documented(name):
    assert f":: sqlstamp.{name}\n" in DOCS_INDEX.read_text()
