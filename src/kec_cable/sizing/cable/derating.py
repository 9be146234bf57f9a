"""
Determination of the current-carrying capacity of a bundle of cables at
installation conditions.

The base capacity is looked up in the KEC ampacity tables for the number of
loaded conductors of the voltage system (two for single-phase, three for
three-phase) and then reduced by the grouping factor of the number of
circuits in the bundle. Core-count effects are already part of the loaded
conductor columns; no further reduction is applied. Ambient temperature is
assumed equal to the reference temperature of the tables (30 °C in air,
20 °C in the ground).
"""
import logging
from dataclasses import dataclass

from ...general import VoltageSystem, num_loaded_conductors
from ...materials import InsulationClass
from ...catalogue import CABLE_INSULATION, InstallationMethod
from .ampacity import get_ampacity_pair
from .grouping import get_grouping_factor
from .models import CableSpec

__all__ = [
    "AmpacityData",
    "resolve_installation_method",
    "resolve_insulation_class",
    "circuit_count",
    "loaded_label",
    "get_derating",
    "allowable_current"
]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmpacityData:
    """
    Intermediate results of the ampacity determination (unrounded).

    Attributes
    ----------
    install_method: str
        Installation method the capacity was looked up for.
    insulation: InsulationClass
        Insulation class of the cable type.
    T_amb_ref: float
        Reference ambient temperature of the capacities, degC (air, or
        ground for buried methods).
    current_capacity_2: float
        Capacity with two loaded conductors at reference conditions, A.
    current_capacity_3: float
        Capacity with three loaded conductors at reference conditions, A.
    num_loaded_conductors: int
        Loaded conductors of the voltage system (2 or 3).
    current_capacity_ref: float
        Selected capacity at reference conditions, A.
    num_circuits: int
        Number of circuits in the bundle.
    grouping_factor: float
        Reduction factor for the number of circuits.
    current_capacity: float
        Capacity at installation conditions, A.
    """
    install_method: str
    insulation: InsulationClass
    T_amb_ref: float
    current_capacity_2: float
    current_capacity_3: float
    num_loaded_conductors: int
    current_capacity_ref: float
    num_circuits: int
    grouping_factor: float
    current_capacity: float


def resolve_installation_method(spec: CableSpec) -> str:
    """
    Returns the installation method of `spec`. If none is given, single-core
    cables default to B1 and multi-core cables to B2 (conduit on a wall).
    """
    if spec.install_method:
        return spec.install_method
    if spec.single_core:
        return InstallationMethod.B1
    return InstallationMethod.B2


def resolve_insulation_class(cable_type: str) -> InsulationClass:
    """
    Returns the insulation class of the given cable type. Unknown cable types
    are rated as PVC (70 °C).
    """
    return CABLE_INSULATION.get(cable_type, InsulationClass.PVC)


def _num_circuits(quantity: int, single_core: bool, n_loaded: int) -> int:
    if not single_core:
        # every multicore cable is a circuit of its own
        return quantity
    # a remaining wire still counts as a circuit
    return -(-quantity // n_loaded)


def circuit_count(spec: CableSpec) -> int:
    """
    Returns the number of circuits formed by the cables of `spec`.

    Single-core cables form one circuit per 2 wires (single-phase) or per 3
    wires (three-phase), rounded up. Each multicore cable is one circuit.
    """
    if not spec.single_core:
        return spec.quantity
    return _num_circuits(spec.quantity, True, num_loaded_conductors(spec.system))


def loaded_label(system: VoltageSystem | str) -> str:
    match system:
        case VoltageSystem.SINGLE_PHASE:
            return "2-loaded (single-phase)"
        case VoltageSystem.THREE_PHASE:
            return "3-loaded (three-phase)"
    return "2-loaded (default)"


def get_derating(spec: CableSpec) -> AmpacityData:
    """
    Determines the current-carrying capacity of the cables of
    `spec` at installation conditions.

    Parameters
    ----------
    spec: CableSpec
        Cables to calculate.

    Returns
    -------
    AmpacityData

    Raises
    ------
    UnsupportedAmpacityCombination
        If the ampacity tables hold no value for the conductor size,
        insulation class and installation method.
    """
    insulation = resolve_insulation_class(spec.cable_type)
    method = resolve_installation_method(spec)
    I_2, I_3 = get_ampacity_pair(spec.size, insulation, method)
    if InstallationMethod(method).buried:
        T_amb_ref = insulation.properties.T_amb_ground
    else:
        T_amb_ref = insulation.properties.T_amb_air
    n_loaded = num_loaded_conductors(spec.system)
    I_z0 = I_3 if n_loaded == 3 else I_2
    n_circuits = _num_circuits(spec.quantity, spec.single_core, n_loaded)
    k_G = get_grouping_factor(n_circuits)
    I_z = I_z0 * k_G
    logger.debug(
        f"{spec.size} mm² {insulation} method {method}: I_z0 = {I_z0} A "
        f"({n_loaded} loaded), {n_circuits} circuit(s), k_G = {k_G:.2f}, "
        f"I_z = {I_z:.3f} A"
    )
    return AmpacityData(
        install_method=method,
        insulation=insulation,
        T_amb_ref=T_amb_ref,
        current_capacity_2=I_2,
        current_capacity_3=I_3,
        num_loaded_conductors=n_loaded,
        current_capacity_ref=I_z0,
        num_circuits=n_circuits,
        grouping_factor=k_G,
        current_capacity=I_z
    )


def allowable_current(spec: CableSpec) -> float:
    """
    Returns the current-carrying capacity in amperes of the cables of
    `spec` at installation conditions (unrounded).
    """
    return get_derating(spec).current_capacity
