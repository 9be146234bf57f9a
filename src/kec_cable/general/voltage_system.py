import warnings
from enum import StrEnum

__all__ = [
    "VoltageSystem",
    "CoreCount",
    "FallbackWarning",
    "num_loaded_conductors"
]


class FallbackWarning(UserWarning):
    """
    Issued when an unrecognized code is handled with a compatibility
    fallback instead of being rejected.
    """
    pass


class VoltageSystem(StrEnum):
    """
    Voltage system of the circuit. The member values are the exact codes
    exchanged with the user interface.
    """
    SINGLE_PHASE = "1Φ"
    THREE_PHASE = "3Φ"


class CoreCount(StrEnum):
    SINGLE = "1C"
    TWO = "2C"
    THREE = "3C"
    FOUR = "4C"


def num_loaded_conductors(system: VoltageSystem | str) -> int:
    """
    Returns the number of loaded conductors of a circuit in the given voltage
    system: 2 for single-phase, 3 for three-phase.

    Any other label falls back to 2 loaded conductors and issues a
    `FallbackWarning`.
    """
    match system:
        case VoltageSystem.SINGLE_PHASE:
            return 2
        case VoltageSystem.THREE_PHASE:
            return 3
    warnings.warn(
        f"Unknown voltage system {system!r}; assuming 2 loaded conductors.",
        category=FallbackWarning
    )
    return 2
