# test/test_parse.py
from datetime import date

import numpy as np
import pytest

from fuelchart.core import load, parse_date, parse_number, ParseError


def _rows():
    return [
        {"month": "2020-01-01", "fuel_type": "Petrol", "number": "100"},
        {"month": "2020-01-01", "fuel_type": "Electric", "number": "10"},
        {"month": "2020-02-01", "fuel_type": "Petrol", "number": "90"},
        {"month": "2020-02-01", "fuel_type": "Electric", "number": "20"},
    ]


def test_load_ok_preserves_row_count_and_order():
    ds = load(_rows())

    assert len(ds) == 4
    assert ds[0].timestamp == date(2020, 1, 1)
    assert ds[3].series_key == "Electric"
    assert all(s.value >= 0 for s in ds)


def test_load_custom_columns():
    rows = [{"when": "2021-05-01", "kind": "Diesel", "count": "7"}]
    ds = load(rows, date_column="when", key_column="kind", value_column="count")
    assert ds[0].series_key == "Diesel"
    assert ds[0].value == 7.0


def test_load_empty_rows_gives_empty_dataset():
    assert len(load([])) == 0


@pytest.mark.parametrize("text", ["2020/01/01", "01-02-2020", "2020-13-01", "", "yesterday"])
def test_parse_date_rejects_bad_format(text):
    with pytest.raises(ParseError):
        parse_date(text)


def test_parse_date_ok():
    assert parse_date("2016-07-01") == date(2016, 7, 1)


@pytest.mark.parametrize("text, expected", [("100", 100.0), (" 12 ", 12.0), ("1e3", 1000.0), ("0.5", 0.5)])
def test_parse_number_ok(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,234", "nan", "inf", "1_000", "-5", None])
def test_parse_number_rejects(text):
    with pytest.raises(ParseError):
        parse_number(text)


def test_load_bad_date_aborts_with_row_and_column():
    rows = _rows()
    rows[2]["month"] = "Feb 2020"

    with pytest.raises(ParseError) as excinfo:
        load(rows)
    assert excinfo.value.row == 2
    assert excinfo.value.column == "month"


def test_load_bad_number_aborts():
    rows = _rows()
    rows[1]["number"] = "n/a"

    with pytest.raises(ParseError) as excinfo:
        load(rows)
    assert excinfo.value.row == 1
    assert excinfo.value.column == "number"


def test_load_missing_column():
    with pytest.raises(ParseError) as excinfo:
        load([{"month": "2020-01-01", "number": "1"}])
    assert excinfo.value.column == "fuel_type"


def test_load_empty_key_is_parse_error():
    with pytest.raises(ParseError):
        load([{"month": "2020-01-01", "fuel_type": "", "number": "1"}])


def test_load_series_out_of_order_is_parse_error():
    rows = [
        {"month": "2020-02-01", "fuel_type": "Petrol", "number": "1"},
        {"month": "2020-01-01", "fuel_type": "Petrol", "number": "2"},
    ]
    with pytest.raises(ParseError):
        load(rows)


def test_parse_number_accepts_numpy_scalars():
    assert parse_number(np.int64(42)) == 42.0
    assert parse_number(np.float32(1.5)) == 1.5

    with pytest.raises(ParseError):
        parse_number(np.bool_(True))
