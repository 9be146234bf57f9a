"""
Outer diameters of low-voltage cables in millimeters, per cable type, core
count and nominal conductor size.

Only base constructions (1-core, and 2-core for some families) are tabulated
from manufacturer data. Other core counts are derived from a base diameter with
a fixed multiplier per cable family. Combinations that are not manufactured
have no diameter at all.

References
----------
TFR-CV: dcord.com product data.
HFIX: Nexans, Daeshin Cable product data.
"""
import logging

from ...utils.lookup_table import LookupTable, LookupTableError
from .exceptions import UnsupportedCableSpec

__all__ = [
    "CORE_MULTIPLIERS",
    "get_outer_diameter",
    "find_outer_diameter"
]


logger = logging.getLogger(__name__)

_SIZES = [
    "1.5", "2.5", "4", "6", "10", "16", "25", "35", "50",
    "70", "95", "120", "150", "185", "240", "300", "400", "500"
]


def _create_table(
    cable_type: str,
    columns: dict[str, list[float]]
) -> LookupTable:
    col_header = list(columns.keys())
    data = []
    for i in range(len(_SIZES)):
        row = []
        for col in columns.values():
            row.append(col[i] if i < len(col) else float("nan"))
        data.append(row)
    return LookupTable.create(
        row_header=_SIZES,
        col_header=col_header,
        data=data,
        description=f"outer diameter in mm, {cable_type}",
        rows_description="nominal conductor size in mm²",
        cols_description="number of cores"
    )


OUTER_DIAMETER_TABLES: dict[str, LookupTable] = {
    "TFR-CV": _create_table("TFR-CV", {
        "1C": [
            6.3, 6.7, 7.2, 7.8, 9.4, 10.0, 12.0, 13.0, 14.5,
            16.0, 18.5, 20.0, 22.0, 24.0, 27.0, 30.0, 34.0, 37.0
        ],
        "2C": [
            11.0, 12.0, 13.0, 14.0, 18.0, 21.0, 25.0, 29.0, 34.0,
            39.0, 44.0, 50.0, 55.0, 61.0, 67.0, 75.0
        ],
    }),
    "HFIX": _create_table("HFIX", {
        "1C": [
            3.3, 4.0, 4.6, 5.2, 6.5, 8.0, 10.1, 11.3, 13.2,
            15.5, 18.0, 20.0, 22.5, 25.0, 28.5, 32.0
        ],
    }),
    "CV": _create_table("CV", {
        "1C": [
            6.0, 6.4, 6.9, 7.5, 9.0, 9.6, 11.5, 12.5, 14.0,
            15.5, 18.0, 19.5, 21.5, 23.5, 26.5, 29.5, 33.0, 36.0
        ],
        "2C": [
            10.5, 11.5, 12.5, 13.5, 17.0, 20.0, 24.0, 28.0, 33.0,
            38.0, 43.0, 49.0, 54.0, 60.0, 66.0, 74.0
        ],
    }),
    "FR-CV": _create_table("FR-CV", {
        "1C": [
            6.8, 7.2, 7.7, 8.3, 10.0, 10.6, 12.6, 13.6, 15.1,
            16.6, 19.1, 20.6, 22.6, 24.6, 27.6, 30.6, 34.6, 37.6
        ],
    }),
    "TFR-8": _create_table("TFR-8", {
        "1C": [
            6.5, 6.9, 7.4, 8.0, 9.6, 10.2, 12.2, 13.2, 14.7,
            16.2, 18.7, 20.2, 22.2, 24.2, 27.2, 30.2
        ],
    }),
}

# derived core count -> (base core count, multiplier)
CORE_MULTIPLIERS: dict[str, dict[str, tuple[str, float]]] = {
    "HFIX": {},  # single-core wire only
    "TFR-CV": {"3C": ("2C", 1.15), "4C": ("2C", 1.25)},
    "CV": {"3C": ("2C", 1.15), "4C": ("2C", 1.25)},
    "FR-CV": {"2C": ("1C", 1.65), "3C": ("1C", 1.9), "4C": ("1C", 2.1)},
    "TFR-8": {"2C": ("1C", 1.65), "3C": ("1C", 1.9), "4C": ("1C", 2.1)},
}


def find_outer_diameter(cable_type: str, cores: str, size: str) -> float | None:
    """
    Returns the outer diameter in mm of a single cable, or None if the
    combination of cable type, core count and size is not manufactured or
    unknown.

    Parameters
    ----------
    cable_type: str
        Cable type code, e.g. "TFR-CV".
    cores: str
        Core count code, e.g. "3C".
    size: str
        Nominal conductor size in mm², e.g. "2.5".

    Returns
    -------
    float | None
    """
    table = OUTER_DIAMETER_TABLES.get(cable_type)
    if table is None:
        return None
    base_cores, k = cores, 1.0
    if cores not in table.col_keys:
        derived = CORE_MULTIPLIERS[cable_type].get(cores)
        if derived is None:
            return None
        base_cores, k = derived
    try:
        D = table.data_value(size, base_cores)
    except LookupTableError:
        return None
    return D * k


def get_outer_diameter(cable_type: str, cores: str, size: str) -> float:
    """
    Returns the outer diameter in mm of a single cable.

    Raises
    ------
    UnsupportedCableSpec
        If no diameter exists for the combination.
    """
    D = find_outer_diameter(cable_type, cores, size)
    if D is None:
        raise UnsupportedCableSpec(
            f"Unsupported cable: {cable_type} {cores} {size} mm² "
            f"has no outer diameter data."
        )
    logger.debug(f"Outer diameter of {cable_type} {cores} {size} mm²: {D:.3g} mm")
    return D
