"""
Command dispatch for user-interface hosts.

Maps command names to the public operations of the package and converts
their results to plain, JSON-compatible data (dicts, lists, strings and
numbers). Calculation errors are raised unchanged for the host to show.

Example
-------
>>> invoke("get_cable_sizes")[:3]
['1.5', '2.5', '4']
"""
from dataclasses import asdict
from typing import Any, Callable

from .catalogue import (
    list_cable_types,
    list_options_for_cable_type,
    list_install_methods_for_cores,
    list_cores_for_system,
    list_cable_sizes,
    list_core_options,
    list_install_methods
)
from .sizing import CableSpec, calculate

__all__ = [
    "COMMANDS",
    "UnknownCommandError",
    "invoke"
]


class UnknownCommandError(LookupError):
    pass


def _pairs(pairs: list[tuple[str, str]]) -> list[list[str]]:
    return [list(p) for p in pairs]


def _calculate(
    cable_type: str,
    cores: str,
    size: str,
    quantity: int,
    system: str,
    ground_wire: str | bool = False,
    install_method: str = ""
) -> dict[str, Any]:
    # the host sends the ground wire as its cable type ("HFIX") or a "none"
    # label
    if isinstance(ground_wire, str):
        ground_wire = ground_wire == "HFIX"
    spec = CableSpec(
        cable_type=cable_type,
        cores=cores,
        size=size,
        quantity=quantity,
        system=system,
        ground_wire=ground_wire,
        install_method=install_method
    )
    return calculate(spec).to_dict()


def _get_cable_types() -> list[dict[str, Any]]:
    return [asdict(info) for info in list_cable_types()]


def _get_cable_options(cable_type: str) -> dict[str, Any]:
    options = list_options_for_cable_type(cable_type)
    return {
        "cores": _pairs(options.cores),
        "sizes": list(options.sizes),
        "install_methods": _pairs(options.install_methods)
    }


def _get_cores_for_system(system: str, available_cores: list[str]) -> list[list[str]]:
    return _pairs(list_cores_for_system(system, available_cores))


def _get_install_methods_for_cores(cores: str) -> list[list[str]]:
    return _pairs(list_install_methods_for_cores(cores))


COMMANDS: dict[str, Callable[..., Any]] = {
    "calculate": _calculate,
    "get_cable_types": _get_cable_types,
    "get_cable_options": _get_cable_options,
    "get_cores_for_system": _get_cores_for_system,
    "get_install_methods_for_cores": _get_install_methods_for_cores,
    "get_cable_sizes": list_cable_sizes,
    "get_core_options": lambda: _pairs(list_core_options()),
    "get_install_methods": lambda: _pairs(list_install_methods()),
}


def invoke(command: str, **kwargs: Any) -> Any:
    """
    Runs the command with the given name.

    Parameters
    ----------
    command: str
        One of the keys of `COMMANDS`.
    **kwargs:
        Arguments of the command.

    Returns
    -------
    Any
        JSON-compatible result of the command.

    Raises
    ------
    UnknownCommandError
        If no command with the given name exists.
    """
    try:
        handler = COMMANDS[command]
    except KeyError:
        raise UnknownCommandError(f"Unknown command: {command!r}.") from None
    return handler(**kwargs)
