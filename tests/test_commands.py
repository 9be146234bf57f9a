"""Tests for the command dispatch used by user-interface hosts."""

import json

import pytest

from kec_cable.commands import COMMANDS, UnknownCommandError, invoke
from kec_cable.sizing.cable import UnsupportedCableSpec

PAYLOAD = {
    "cable_type": "HFIX",
    "cores": "1C",
    "size": "1.5",
    "quantity": 10,
    "system": "3Φ",
    "ground_wire": "none",
    "install_method": "",
}


def test_calculate():
    result = invoke("calculate", **PAYLOAD)
    assert result["allowable_current"] == 13.0
    assert result["total_area"] == 85.53
    assert result["recommended_conduit"] == "C22 (22mm)"
    json.dumps(result)


def test_calculate_with_ground_wire():
    plain = invoke("calculate", **PAYLOAD)
    with_pe = invoke("calculate", **{**PAYLOAD, "ground_wire": "HFIX"})
    assert with_pe["total_area"] > plain["total_area"]


def test_calculate_error():
    with pytest.raises(UnsupportedCableSpec):
        invoke("calculate", **{**PAYLOAD, "cores": "2C"})


def test_unknown_command():
    with pytest.raises(UnknownCommandError):
        invoke("delete_everything")


def test_option_commands_are_json_compatible():
    results = [
        invoke("get_cable_types"),
        invoke("get_cable_options", cable_type="HFIX"),
        invoke("get_cores_for_system", system="3Φ", available_cores=["1C", "3C"]),
        invoke("get_install_methods_for_cores", cores="1C"),
        invoke("get_cable_sizes"),
        invoke("get_core_options"),
        invoke("get_install_methods"),
    ]
    # tuples would come back as lists
    for result in results:
        assert json.loads(json.dumps(result, ensure_ascii=False)) == result


def test_cable_options():
    options = invoke("get_cable_options", cable_type="HFIX")
    assert options["cores"] == [["1C", "1C (single core)"]]
    assert options["sizes"][0] == "1.5"


def test_command_names():
    assert set(COMMANDS) == {
        "calculate",
        "get_cable_types",
        "get_cable_options",
        "get_cores_for_system",
        "get_install_methods_for_cores",
        "get_cable_sizes",
        "get_core_options",
        "get_install_methods",
    }
