"""
Reduction factors for groups of more than one circuit or multicore cable
(KEC Table B.52.17, cables bunched in air, on a surface, embedded or enclosed).
"""
from ...utils.lookup_table import LookupTable

__all__ = [
    "tbl_group_correction",
    "get_grouping_factor"
]


def _create_group_correction_table() -> LookupTable:
    data = [
        [1.00, 0.80, 0.70, 0.65, 0.60, 0.57, 0.54, 0.52, 0.50, 0.45, 0.41, 0.38]
    ]
    # a column covers all circuit counts above the previous column
    col_header = [1, 2, 3, 4, 5, 6, 7, 8, 9, 12, 16, 20]
    row_header = {
        "bunched": "Bunched in air, on a surface, embedded or enclosed (conduit)"
    }
    return LookupTable.create(
        row_header,
        col_header,
        data,
        description="reduction factors for groups of circuits (KEC Table B.52.17)",
        rows_description="method of installation",
        cols_description="number of circuits or multicore cables"
    )


tbl_group_correction = _create_group_correction_table()


def get_grouping_factor(num_circuits: int) -> float:
    """
    Returns the reduction factor for the given number of bunched circuits.

    Zero or one circuit gives the factor of a single circuit. More circuits
    than the last column of the table (20) get the factor of that last column.

    Parameters
    ----------
    num_circuits: int
        Number of circuits or multicore cables in the group.

    Returns
    -------
    float
    """
    col = tbl_group_correction.colheader_value(max(num_circuits, 1))
    return tbl_group_correction.data_value("bunched", col)
