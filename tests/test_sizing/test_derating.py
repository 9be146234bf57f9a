"""Tests for the current-carrying capacity at installation conditions."""

import pytest

from kec_cable.general import FallbackWarning, VoltageSystem
from kec_cable.materials import InsulationClass
from kec_cable.sizing.cable import (
    CableSpec,
    UnsupportedAmpacityCombination,
    allowable_current,
    circuit_count,
    get_derating,
    loaded_label,
    resolve_installation_method,
    resolve_insulation_class,
)


def test_single_phase_pvc_single_circuit():
    # unknown cable types are rated as PVC
    spec = CableSpec("VV", "1C", "2.5", quantity=2, system="1Φ", install_method="B1")
    data = get_derating(spec)
    assert data.insulation == InsulationClass.PVC
    assert data.current_capacity_2 == 24.0
    assert data.num_loaded_conductors == 2
    assert data.num_circuits == 1
    assert data.grouping_factor == 1.0
    assert allowable_current(spec) == pytest.approx(24.0)


def test_hfix_three_phase_bundle():
    spec = CableSpec("HFIX", "1C", "1.5", quantity=10, system="3Φ")
    data = get_derating(spec)
    assert data.install_method == "B1"
    assert data.insulation == InsulationClass.XLPE
    assert data.num_loaded_conductors == 3
    assert data.current_capacity_ref == 20.0
    assert data.num_circuits == 4
    assert data.grouping_factor == pytest.approx(0.65)
    assert round(data.current_capacity, 1) == 13.0


@pytest.mark.parametrize(
    "cores, install_method, expected",
    [
        ("1C", None, "B1"),
        ("1C", "", "B1"),
        ("3C", None, "B2"),
        ("4C", "", "B2"),
        ("1C", "C", "C"),
        ("3C", "F", "F"),
    ],
)
def test_resolve_installation_method(cores, install_method, expected):
    spec = CableSpec("CV", cores, "10", install_method=install_method)
    assert resolve_installation_method(spec) == expected


@pytest.mark.parametrize("cable_type", ["HFIX", "TFR-CV", "CV", "FR-CV", "TFR-8"])
def test_catalogue_types_are_xlpe(cable_type):
    assert resolve_insulation_class(cable_type) == InsulationClass.XLPE


def test_unknown_type_is_pvc():
    assert resolve_insulation_class("VV") == InsulationClass.PVC


@pytest.mark.parametrize(
    "cores, quantity, system, expected",
    [
        ("1C", 10, "3Φ", 4),
        ("1C", 9, "3Φ", 3),
        ("1C", 3, "1Φ", 2),
        ("1C", 2, "1Φ", 1),
        ("1C", 1, "3Φ", 1),
        ("3C", 5, "3Φ", 5),
        ("2C", 1, "1Φ", 1),
    ],
)
def test_circuit_count(cores, quantity, system, expected):
    spec = CableSpec("CV", cores, "10", quantity=quantity, system=system)
    assert circuit_count(spec) == expected


def test_unknown_system_falls_back_to_two_loaded():
    spec = CableSpec("CV", "1C", "10", quantity=3, system="DC")
    assert spec.system == "DC"
    with pytest.warns(FallbackWarning):
        assert circuit_count(spec) == 2
    with pytest.warns(FallbackWarning):
        data = get_derating(spec)
    assert data.num_loaded_conductors == 2
    assert data.current_capacity_ref == data.current_capacity_2


def test_multicore_unknown_system():
    spec = CableSpec("CV", "3C", "10", system="DC")
    with pytest.warns(FallbackWarning):
        I_z = allowable_current(spec)
    assert I_z == pytest.approx(69.0)


def test_no_extra_core_count_reduction():
    three = CableSpec("CV", "3C", "25", quantity=2, system="3Φ")
    four = CableSpec("CV", "4C", "25", quantity=2, system="3Φ")
    assert allowable_current(three) == allowable_current(four)


def test_reduction_never_increases_capacity():
    for quantity in range(1, 30):
        spec = CableSpec("HFIX", "1C", "4", quantity=quantity, system="3Φ")
        data = get_derating(spec)
        assert data.current_capacity <= data.current_capacity_ref


def test_unsupported_method():
    spec = CableSpec("CV", "1C", "10", install_method="X")
    with pytest.raises(UnsupportedAmpacityCombination):
        get_derating(spec)


@pytest.mark.parametrize(
    "system, expected",
    [
        (VoltageSystem.SINGLE_PHASE, "2-loaded (single-phase)"),
        ("3Φ", "3-loaded (three-phase)"),
        ("DC", "2-loaded (default)"),
    ],
)
def test_loaded_label(system, expected):
    assert loaded_label(system) == expected


@pytest.mark.parametrize(
    "install_method, expected",
    [("B1", 30.0), ("C", 30.0), ("D1", 20.0), ("E", 30.0)],
)
def test_reference_ambient(install_method, expected):
    spec = CableSpec("HFIX", "1C", "10", install_method=install_method)
    data = get_derating(spec)
    assert data.T_amb_ref == expected
    assert data.insulation.properties.T_max_cont == 90.0
