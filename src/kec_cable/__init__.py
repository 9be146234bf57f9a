"""
kec_cable

Cable sizing for low-voltage installations according to KEC / IEC 60364-5-52:
installed cross-sectional area, current-carrying capacity with grouping
reduction, and conduit size with fill rate.
"""
from .pint_setup import UNITS, Quantity, Q_
from .config import SizingConfig, DEFAULT_CONFIG

from . import general
from . import materials
from . import utils
from . import catalogue
from . import sizing
from . import commands

from .general import VoltageSystem, CoreCount
from .catalogue import (
    CableType,
    InstallationMethod,
    list_cable_types,
    list_options_for_cable_type,
    list_install_methods_for_cores,
    list_cores_for_system,
    list_cable_sizes,
    list_core_options,
    list_install_methods
)
from .sizing import (
    CableSpec,
    CalculationResult,
    CableRun,
    calculate,
    CableSizingError,
    InvalidCableSpec,
    UnsupportedCableSpec,
    UnsupportedAmpacityCombination
)


__all__ = [
    "UNITS",
    "Quantity",
    "Q_",
    "SizingConfig",
    "DEFAULT_CONFIG",
    "general",
    "materials",
    "utils",
    "catalogue",
    "sizing",
    "commands",
    "VoltageSystem",
    "CoreCount",
    "CableType",
    "InstallationMethod",
    "list_cable_types",
    "list_options_for_cable_type",
    "list_install_methods_for_cores",
    "list_cores_for_system",
    "list_cable_sizes",
    "list_core_options",
    "list_install_methods",
    "CableSpec",
    "CalculationResult",
    "CableRun",
    "calculate",
    "CableSizingError",
    "InvalidCableSpec",
    "UnsupportedCableSpec",
    "UnsupportedAmpacityCombination"
]


__version__ = "0.1.0"
