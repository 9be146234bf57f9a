"""
Option lists offered to the user interface.

The lists only enumerate compatible codes; they take no part in the numeric
calculation. Codes are returned as plain strings, labels as display text.
"""
import warnings
from dataclasses import dataclass, field

from ..general import VoltageSystem, CoreCount, FallbackWarning
from .cable_types import CableType
from .installation import (
    InstallationMethod,
    INSTALL_METHOD_LABELS,
    SINGLE_CORE_METHODS,
    MULTI_CORE_METHODS
)

__all__ = [
    "CABLE_SIZES",
    "STANDARD_SIZES",
    "EXTENDED_SIZES",
    "CORE_LABELS",
    "SYSTEM_CORE_LABELS",
    "CableTypeOptions",
    "list_options_for_cable_type",
    "list_install_methods_for_cores",
    "list_cores_for_system",
    "list_cable_sizes",
    "list_core_options",
    "list_install_methods"
]


# nominal conductor sizes in mm²
STANDARD_SIZES: tuple[str, ...] = (
    "1.5", "2.5", "4", "6", "10", "16", "25", "35",
    "50", "70", "95", "120", "150", "185", "240", "300"
)

EXTENDED_SIZES: tuple[str, ...] = STANDARD_SIZES + ("400", "500")

CABLE_SIZES = EXTENDED_SIZES

CORE_LABELS: dict[str, str] = {
    "1C": "1C (single core)",
    "2C": "2C (2-core)",
    "3C": "3C (3-core)",
    "4C": "4C (4-core)",
}

# labels used when the core count is offered for a voltage system
SYSTEM_CORE_LABELS: dict[str, str] = {
    "1C": "1C (single core)",
    "2C": "2C (single-phase 2-wire)",
    "3C": "3C (single-phase 3-wire / three-phase 3-wire)",
    "4C": "4C (three-phase 4-wire)",
}

_SYSTEM_CORES: dict[str, tuple[CoreCount, ...]] = {
    VoltageSystem.SINGLE_PHASE: (CoreCount.SINGLE, CoreCount.TWO, CoreCount.THREE),
    VoltageSystem.THREE_PHASE: (CoreCount.SINGLE, CoreCount.THREE, CoreCount.FOUR),
}


@dataclass(frozen=True)
class CableTypeOptions:
    """
    Options that can be combined with a given cable type.

    Attributes
    ----------
    cores:
        (code, label) pairs of the manufactured core counts.
    sizes:
        Nominal conductor sizes in mm² as strings.
    install_methods:
        (code, label) pairs of the applicable installation methods.
    """
    cores: list[tuple[str, str]] = field(default_factory=list)
    sizes: list[str] = field(default_factory=list)
    install_methods: list[tuple[str, str]] = field(default_factory=list)


def _core_pairs(cores: tuple[CoreCount, ...]) -> list[tuple[str, str]]:
    return [(str(c), CORE_LABELS[c]) for c in cores]


def _method_pairs(methods) -> list[tuple[str, str]]:
    return [(str(m), INSTALL_METHOD_LABELS[m]) for m in methods]


def list_options_for_cable_type(cable_type: CableType | str) -> CableTypeOptions:
    """
    Returns the core counts, conductor sizes and installation methods that can
    be selected for the given cable type. An unknown cable type gets empty
    lists.
    """
    all_cores = tuple(CoreCount)
    match cable_type:
        case CableType.HFIX:
            return CableTypeOptions(
                cores=_core_pairs((CoreCount.SINGLE,)),
                sizes=list(STANDARD_SIZES),
                install_methods=_method_pairs(SINGLE_CORE_METHODS)
            )
        case CableType.TFR_CV | CableType.CV:
            return CableTypeOptions(
                cores=_core_pairs(all_cores),
                sizes=list(EXTENDED_SIZES),
                install_methods=_method_pairs(InstallationMethod)
            )
        case CableType.FR_CV | CableType.TFR_8:
            return CableTypeOptions(
                cores=_core_pairs(all_cores),
                sizes=list(STANDARD_SIZES),
                install_methods=_method_pairs(InstallationMethod)
            )
    return CableTypeOptions()


def list_install_methods_for_cores(cores: CoreCount | str) -> list[tuple[str, str]]:
    """
    Returns the installation methods applicable to single-core (1C) or
    multi-core (2C, 3C, 4C) cables; unknown core codes get an empty list.
    """
    match cores:
        case CoreCount.SINGLE:
            return _method_pairs(SINGLE_CORE_METHODS)
        case CoreCount.TWO | CoreCount.THREE | CoreCount.FOUR:
            return _method_pairs(MULTI_CORE_METHODS)
    return []


def list_cores_for_system(
    system: VoltageSystem | str,
    available_cores: list[str]
) -> list[tuple[str, str]]:
    """
    Returns the core counts suited to the voltage system that are also in
    `available_cores`, in catalogue order.

    Single-phase allows 1C, 2C and 3C; three-phase allows 1C, 3C and 4C. An
    unknown voltage system allows all four core counts and issues a
    `FallbackWarning`.
    """
    allowed = _SYSTEM_CORES.get(system)
    if allowed is None:
        warnings.warn(
            f"Unknown voltage system {system!r}; offering all core counts.",
            category=FallbackWarning
        )
        allowed = tuple(CoreCount)
    available = set(available_cores)
    return [
        (str(c), SYSTEM_CORE_LABELS[c])
        for c in CoreCount
        if c in allowed and c in available
    ]


def list_cable_sizes() -> list[str]:
    return list(CABLE_SIZES)


def list_core_options() -> list[tuple[str, str]]:
    return _core_pairs(tuple(CoreCount))


def list_install_methods() -> list[tuple[str, str]]:
    return _method_pairs(InstallationMethod)
