"""
Cable bundle sizing with pint quantities.

Wraps the calculation routine of module `sizing` inside a single class
`CableRun` that takes the conductor size as a `Quantity` and exposes its
results as quantities.
"""
from dataclasses import dataclass, field

from ... import Quantity, Q_
from ...pint_setup import magnitude
from ...config import SizingConfig
from ...general import VoltageSystem, CoreCount
from ...catalogue import CableType, InstallationMethod, CABLE_SIZES
from .exceptions import InvalidCableSpec
from .derating import AmpacityData
from .models import CableSpec, CalculationResult
from .sizing import calculate_details

__all__ = [
    "CableRun",
    "size_code"
]


def size_code(S: Quantity | float) -> str:
    """
    Returns the nominal size code (e.g. "2.5") of the given conductor
    cross-sectional area.

    Raises
    ------
    InvalidCableSpec
        If `S` is not a nominal conductor size.
    """
    S = magnitude(S, "mm ** 2")
    for code in CABLE_SIZES:
        if abs(float(code) - S) < 1e-9:
            return code
    raise InvalidCableSpec(f"{S:g} mm² is not a nominal conductor size.")


@dataclass
class CableRun:
    """
    Bundle of identical cables installed in one conduit.

    The bundle is calculated immediately on instantiation of the class.

    Parameters
    ----------
    cable_type: CableType | str
        Cable type, e.g. CableType.TFR_CV.
    cores: CoreCount | str
        Number of cores of each cable.
    S: Quantity
        Nominal cross-sectional area of the conductors. Must be one of the
        nominal sizes of `CABLE_SIZES`.
    quantity: int = 1
        Number of cables.
    system: VoltageSystem = VoltageSystem.SINGLE_PHASE
        Voltage system of the circuits.
    ground_wire: bool = False
        Adds a single HFIX ground wire to the bundle.
    install_method: InstallationMethod | None = None
        Installation method. If None, B1 for single-core and B2 for multi-core
        cables.
    config: SizingConfig | None = None
        Sizing settings.

    Attributes
    ----------
    A_total: Quantity
        Total installed cross-sectional area of the cables (rounded).
    A_cond: Quantity
        Total cross-sectional area of the conductors (rounded).
    I_z: Quantity
        Current-carrying capacity at installation conditions (rounded).
    fill_rate: Quantity
        Fill rate of the recommended conduit (rounded).
    conduit: str
        Name of the recommended conduit.
    summary: str
        Installation method, loaded conductors and grouping factor in words.
    T_amb_ref: Quantity
        Reference ambient temperature of the current-carrying capacity.
    ampacity_data: AmpacityData
        Unrounded intermediate results of the ampacity determination.
    """
    cable_type: CableType | str
    cores: CoreCount | str
    S: Quantity
    quantity: int = 1
    system: VoltageSystem = VoltageSystem.SINGLE_PHASE
    ground_wire: bool = False
    install_method: InstallationMethod | None = None
    config: SizingConfig | None = None

    spec: CableSpec = field(init=False)
    result: CalculationResult = field(init=False)
    ampacity_data: AmpacityData = field(init=False)

    def __post_init__(self):
        self.spec = CableSpec(
            cable_type=self.cable_type,
            cores=self.cores,
            size=size_code(self.S),
            quantity=self.quantity,
            system=self.system,
            ground_wire=self.ground_wire,
            install_method=self.install_method
        )
        self.result, self.ampacity_data = calculate_details(self.spec, self.config)

    @property
    def A_total(self) -> Quantity:
        return Q_(self.result.total_area, 'mm ** 2')

    @property
    def A_cond(self) -> Quantity:
        return Q_(self.result.conductor_area, 'mm ** 2')

    @property
    def I_z(self) -> Quantity:
        return Q_(self.result.allowable_current, 'A')

    @property
    def fill_rate(self) -> Quantity:
        return Q_(self.result.fill_rate, 'pct')

    @property
    def conduit(self) -> str:
        return self.result.recommended_conduit

    @property
    def summary(self) -> str:
        return self.result.install_method_desc

    @property
    def install_method_used(self) -> str:
        return self.ampacity_data.install_method

    @property
    def insulation(self) -> str:
        return self.ampacity_data.insulation

    @property
    def num_circuits(self) -> int:
        return self.ampacity_data.num_circuits

    @property
    def k_group(self) -> float:
        return self.ampacity_data.grouping_factor

    @property
    def T_amb_ref(self) -> Quantity:
        return Q_(self.ampacity_data.T_amb_ref, 'degC')
