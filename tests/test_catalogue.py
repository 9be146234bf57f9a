"""Tests for the option lists offered to the user interface."""

import warnings

import pytest

from kec_cable.catalogue import (
    CABLE_SIZES,
    STANDARD_SIZES,
    CableType,
    get_install_method_description,
    list_cable_sizes,
    list_cable_types,
    list_core_options,
    list_cores_for_system,
    list_install_methods,
    list_install_methods_for_cores,
    list_options_for_cable_type,
)
from kec_cable.general import FallbackWarning
from kec_cable.materials import InsulationClass
from kec_cable.sizing.cable import find_outer_diameter


def codes(pairs):
    return [code for code, _ in pairs]


def test_cable_types():
    types = list_cable_types()
    assert [t.code for t in types] == ["HFIX", "TFR-CV", "CV", "FR-CV", "TFR-8"]
    assert all(t.max_temp == 90 and t.insulation == "XLPE" for t in types)
    for t in types:
        assert t.max_temp == InsulationClass(t.insulation).properties.T_max_cont


def test_hfix_options():
    options = list_options_for_cable_type("HFIX")
    assert options.cores == [("1C", "1C (single core)")]
    assert options.sizes == list(STANDARD_SIZES)
    assert codes(options.install_methods) == ["A1", "B1", "C", "D1", "E"]


@pytest.mark.parametrize("cable_type", [CableType.TFR_CV, "CV"])
def test_power_cable_options(cable_type):
    options = list_options_for_cable_type(cable_type)
    assert codes(options.cores) == ["1C", "2C", "3C", "4C"]
    assert options.sizes[-2:] == ["400", "500"]
    assert len(options.install_methods) == 9


@pytest.mark.parametrize("cable_type", ["FR-CV", "TFR-8"])
def test_special_cable_options(cable_type):
    options = list_options_for_cable_type(cable_type)
    assert codes(options.cores) == ["1C", "2C", "3C", "4C"]
    assert options.sizes == list(STANDARD_SIZES)


def test_unknown_cable_options():
    options = list_options_for_cable_type("VV")
    assert options.cores == [] and options.sizes == [] and options.install_methods == []


def test_hfix_options_have_diameters():
    for size in list_options_for_cable_type("HFIX").sizes:
        assert find_outer_diameter("HFIX", "1C", size) is not None


def test_install_methods_for_cores():
    assert codes(list_install_methods_for_cores("1C")) == ["A1", "B1", "C", "D1", "E"]
    for cores in ("2C", "3C", "4C"):
        assert codes(list_install_methods_for_cores(cores)) == [
            "A2", "B2", "C", "D1", "D2", "F"
        ]
    assert list_install_methods_for_cores("5C") == []


def test_cores_for_system():
    available = ["4C", "3C", "2C", "1C"]
    assert codes(list_cores_for_system("1Φ", available)) == ["1C", "2C", "3C"]
    assert codes(list_cores_for_system("3Φ", available)) == ["1C", "3C", "4C"]
    assert list_cores_for_system("3Φ", ["1C"]) == [("1C", "1C (single core)")]
    assert list_cores_for_system("1Φ", ["4C"]) == []


def test_cores_for_unknown_system():
    with pytest.warns(FallbackWarning):
        pairs = list_cores_for_system("DC", ["1C", "2C", "3C", "4C"])
    assert codes(pairs) == ["1C", "2C", "3C", "4C"]


def test_static_lists():
    assert list_cable_sizes() == list(CABLE_SIZES)
    assert len(list_cable_sizes()) == 18
    assert codes(list_core_options()) == ["1C", "2C", "3C", "4C"]
    assert codes(list_install_methods()) == [
        "A1", "A2", "B1", "B2", "C", "D1", "D2", "E", "F"
    ]


def test_install_method_description():
    assert get_install_method_description("D2") == "Direct buried"
    assert get_install_method_description("X") == "Other"


def test_unknown_cores_get_no_methods_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert list_install_methods_for_cores("5C") == []
        assert list_install_methods_for_cores("") == []
