"""Tests for the KEC ampacity tables."""

import pytest

from kec_cable.catalogue import CABLE_SIZES, InstallationMethod
from kec_cable.materials import InsulationClass
from kec_cable.sizing.cable import (
    AMPACITY_TABLES,
    UnsupportedAmpacityCombination,
    get_ampacity,
    get_ampacity_pair,
)


@pytest.mark.parametrize(
    "size, insulation, method, expected",
    [
        ("2.5", "PVC", "B1", (24.0, 21.0)),
        ("1.5", "PVC", "B1", (17.5, 15.5)),
        ("1.5", "PVC", "D2", (24.0, 19.0)),
        ("1.5", "XLPE", "B1", (23.0, 20.0)),
        ("10", "XLPE", "E", (86.0, 75.0)),
        ("500", "XLPE", "F", (1127.0, 990.0)),
    ],
)
def test_ampacity_pair(size, insulation, method, expected):
    assert get_ampacity_pair(size, insulation, method) == expected


def test_enum_arguments():
    pair = get_ampacity_pair("2.5", InsulationClass.PVC, InstallationMethod.B1)
    assert pair == (24.0, 21.0)


def test_get_ampacity_selects_column():
    assert get_ampacity("2.5", "PVC", "B1", 2) == 24.0
    assert get_ampacity("2.5", "PVC", "B1", 3) == 21.0


def test_get_ampacity_rejects_loaded_conductors():
    with pytest.raises(ValueError):
        get_ampacity("2.5", "PVC", "B1", 4)


@pytest.mark.parametrize(
    "size, insulation, method",
    [
        ("2.5", "PVC", "D"),
        ("3", "XLPE", "B1"),
        ("2.5", "EPR", "B1"),
        ("2.5", "XLPE", ""),
    ],
)
def test_unsupported_combination(size, insulation, method):
    with pytest.raises(UnsupportedAmpacityCombination):
        get_ampacity_pair(size, insulation, method)


@pytest.mark.parametrize("insulation", ["PVC", "XLPE"])
def test_tables_are_complete(insulation):
    table = AMPACITY_TABLES[insulation]
    for size in CABLE_SIZES:
        for method in InstallationMethod:
            I_2, I_3 = get_ampacity_pair(size, insulation, method)
            assert I_2 >= I_3 > 0.0
    assert table.row_keys == list(CABLE_SIZES)


@pytest.mark.parametrize("method", list(InstallationMethod))
def test_xlpe_rated_above_pvc(method):
    for size in CABLE_SIZES:
        assert (
            get_ampacity_pair(size, "XLPE", method)[0]
            >= get_ampacity_pair(size, "PVC", method)[0]
        )
