import math
from typing import Any
from dataclasses import dataclass, field

from .exceptions import (
    DataNotFoundError,
    RowheaderNotFoundError,
    ColumnheaderNotFoundError
)

__all__ = [
    "LookupTable"
]


@dataclass(frozen=True)
class LookupTable:
    """
    Implements a read-only lookup table with a column header, a row header and
    a data table.

    Two lookup mechanisms are provided:
    1.  Given a row header value and a column header value, returns the value
        in the data cell whose row index and column index correspond with the
        index of the row header value and the index of the column header value.
        Cells holding NaN are treated as "no published value".

    2.  Given a value and a column header of ascending numbers, returns the
        first column header value that is equal to or just greater than the
        given value. Values beyond the last column header either clamp to the
        last column header or raise, depending on the caller's choice.
    """
    data: list[list[float]] = field(default_factory=list)
    col_header: list[Any] | dict[Any, str] = field(default_factory=list)
    row_header: list[Any] | dict[Any, str] = field(default_factory=list)
    description: str = ""
    cols_description: str = ""
    rows_description: str = ""

    @classmethod
    def create(
        cls,
        row_header: list[Any] | dict[Any, str],
        col_header: list[Any] | dict[Any, str],
        data: list[list[float]],
        description: str = "",
        rows_description: str = "",
        cols_description: str = ""
    ) -> 'LookupTable':
        """
        Creates a lookup table. Rows shorter than the column header are padded
        with NaN.

        Parameters
        ----------
        row_header: list[Any] | dict[Any, str]
            List with the row header values or a dict of which the keys are
            the row header values and the dict values are strings that explain
            the meaning of the row header values.
        col_header: list[Any] | dict[Any, str]
            List the column header values or a dict of which the keys are
            the column header values and the dict values are strings that
            explain the meaning of the column header values.
        data: list[list[float]]
            A table of (floating) numbers implemented as a lists in a list.
        description: str, optional
            Describes the contents of the lookup table.
        rows_description: str, optional
            Describes the meaning of the row header values.
        cols_description: str, optional
            Describes the meaning of the column header values.

        Returns
        -------
        LookupTable

        Raises
        ------
        ValueError
            If the shape of `data` does not match the headers.
        """
        if len(data) != len(row_header):
            raise ValueError(
                f"The number of rows in `data` ({len(data)}) is not equal "
                f"to the length of `row_header` ({len(row_header)})."
            )
        rows = []
        for i, row in enumerate(data):
            if len(row) > len(col_header):
                raise ValueError(
                    f"The number of values ({len(row)}) in row {i} is greater "
                    f"than the number of columns ({len(col_header)})."
                )
            d = len(col_header) - len(row)
            rows.append(list(row) + [float("nan")] * d)
        return cls(
            rows,
            col_header,
            row_header,
            description,
            cols_description,
            rows_description
        )

    @property
    def row_keys(self) -> list[Any]:
        if isinstance(self.row_header, dict):
            return list(self.row_header.keys())
        return list(self.row_header)

    @property
    def col_keys(self) -> list[Any]:
        if isinstance(self.col_header, dict):
            return list(self.col_header.keys())
        return list(self.col_header)

    def has_value(self, rowheader_val: Any, colheader_val: Any) -> bool:
        try:
            self.data_value(rowheader_val, colheader_val)
        except (RowheaderNotFoundError, ColumnheaderNotFoundError, DataNotFoundError):
            return False
        return True

    def data_value(self, rowheader_val: Any, colheader_val: Any) -> float:
        """
        Returns the data value that belongs to the given row header value and
        the given column header value.

        Parameters
        ----------
        rowheader_val: Any
            Value present in the row header of the lookup table.
        colheader_val: Any
            Value present in the column header of the lookup table.

        Returns
        -------
        float

        Raises
        ------
        RowheaderNotFoundError
            If `rowheader_val` is not in the row header.
        ColumnheaderNotFoundError
            If `colheader_val` is not in the column header.
        DataNotFoundError
            If the selected cell holds no value (NaN).
        """
        try:
            i = self.row_keys.index(rowheader_val)
        except ValueError:
            raise RowheaderNotFoundError(
                f"{rowheader_val!r} is not a row of table "
                f"'{self.description}'."
            ) from None
        try:
            j = self.col_keys.index(colheader_val)
        except ValueError:
            raise ColumnheaderNotFoundError(
                f"{colheader_val!r} is not a column of table "
                f"'{self.description}'."
            ) from None
        value = self.data[i][j]
        if math.isnan(value):
            raise DataNotFoundError(
                f"Table '{self.description}' has no value for "
                f"({rowheader_val!r}, {colheader_val!r})."
            )
        return value

    def colheader_value(self, data_val: float, clamp: bool = True) -> Any:
        """
        Returns the first column header value that is equal to or just greater
        than the given value. Column header values must be numbers in
        ascending order.

        Parameters
        ----------
        data_val: float
            Value for which we want the corresponding column header value.
        clamp: bool, default True
            If True, a value beyond the last column header returns the last
            column header value. If False, a `ColumnheaderNotFoundError` is
            raised instead.

        Returns
        -------
        Any
        """
        col_keys = self.col_keys
        for key in col_keys:
            if data_val <= key:
                return key
        if clamp:
            return col_keys[-1]
        raise ColumnheaderNotFoundError(
            f"The given value {data_val} falls outside the column header of "
            f"table '{self.description}'."
        )
