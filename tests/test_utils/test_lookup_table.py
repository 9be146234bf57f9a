"""Tests for the generic lookup table."""

import math

import pytest

from kec_cable.utils.lookup_table import (
    LookupTable,
    DataNotFoundError,
    RowheaderNotFoundError,
    ColumnheaderNotFoundError,
)


@pytest.fixture
def table():
    return LookupTable.create(
        row_header=["a", "b"],
        col_header=[1, 2, 5],
        data=[[1.0, 2.0, 3.0], [4.0, 5.0]],
        description="test table",
    )


def test_create_pads_short_rows_with_nan(table):
    assert math.isnan(table.data[1][2])


def test_create_rejects_row_count_mismatch():
    with pytest.raises(ValueError):
        LookupTable.create(row_header=["a"], col_header=[1], data=[[1.0], [2.0]])


def test_create_rejects_long_rows():
    with pytest.raises(ValueError):
        LookupTable.create(row_header=["a"], col_header=[1], data=[[1.0, 2.0]])


def test_data_value(table):
    assert table.data_value("b", 2) == 5.0


def test_data_value_unknown_row(table):
    with pytest.raises(RowheaderNotFoundError):
        table.data_value("c", 1)


def test_data_value_unknown_column(table):
    with pytest.raises(ColumnheaderNotFoundError):
        table.data_value("a", 3)


def test_data_value_missing_cell(table):
    with pytest.raises(DataNotFoundError):
        table.data_value("b", 5)
    assert not table.has_value("b", 5)
    assert table.has_value("a", 5)


def test_dict_headers():
    tbl = LookupTable.create(
        row_header={"x": "first"},
        col_header={("B1", 2): "two", ("B1", 3): "three"},
        data=[[24.0, 21.0]],
    )
    assert tbl.row_keys == ["x"]
    assert tbl.data_value("x", ("B1", 3)) == 21.0


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (1, 1), (1.5, 2), (2, 2), (3, 5), (5, 5), (6, 5)],
)
def test_colheader_value_clamps(table, value, expected):
    assert table.colheader_value(value) == expected


def test_colheader_value_without_clamp(table):
    with pytest.raises(ColumnheaderNotFoundError):
        table.colheader_value(6, clamp=False)
