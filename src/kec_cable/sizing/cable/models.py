from dataclasses import dataclass, asdict
from enum import Enum, StrEnum
from typing import Any, Type

from ...general import VoltageSystem, CoreCount
from ...catalogue import CableType, InstallationMethod
from .exceptions import InvalidCableSpec

__all__ = [
    "CableSpec",
    "CalculationResult",
    "FillStatus"
]


def _as_member(enum_cls: Type[Enum], value: Any) -> Any:
    # Known codes become enum members; unknown codes are kept as given and
    # fail later at table lookup.
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class CableSpec:
    """
    Bundle of identical cables to be installed together.

    Parameters
    ----------
    cable_type: CableType | str
        Cable type code, e.g. "HFIX" or "TFR-CV".
    cores: CoreCount | str
        Core count code: "1C", "2C", "3C" or "4C".
    size: str
        Nominal conductor size in mm² as listed by `list_cable_sizes()`,
        e.g. "2.5".
    quantity: int, default 1
        Number of cable runs (single-core: number of wires).
    system: VoltageSystem | str, default VoltageSystem.SINGLE_PHASE
        Voltage system code: "1Φ" or "3Φ".
    ground_wire: bool, default False
        Adds one HFIX protective earth conductor to the bundle.
    install_method: InstallationMethod | str | None, optional
        Installation method code. If None or empty, the method is inferred
        from the core count (B1 for single-core, B2 for multi-core).

    Raises
    ------
    InvalidCableSpec
        If `quantity` is not a positive integer or `size` is not a string.
    """
    cable_type: CableType | str
    cores: CoreCount | str
    size: str
    quantity: int = 1
    system: VoltageSystem | str = VoltageSystem.SINGLE_PHASE
    ground_wire: bool = False
    install_method: InstallationMethod | str | None = None

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidCableSpec(
                f"`quantity` must be an integer, got {self.quantity!r}."
            )
        if self.quantity < 1:
            raise InvalidCableSpec(
                f"`quantity` must be at least 1, got {self.quantity}."
            )
        if not isinstance(self.size, str):
            raise InvalidCableSpec(
                f"`size` must be a nominal size code such as '2.5', "
                f"got {self.size!r}."
            )
        object.__setattr__(self, "cable_type", _as_member(CableType, self.cable_type))
        object.__setattr__(self, "cores", _as_member(CoreCount, self.cores))
        object.__setattr__(self, "system", _as_member(VoltageSystem, self.system))
        method = self.install_method or None
        if method is not None:
            method = _as_member(InstallationMethod, method)
        object.__setattr__(self, "install_method", method)

    @property
    def single_core(self) -> bool:
        return self.cores == CoreCount.SINGLE


class FillStatus(StrEnum):
    SAFE = "safe"        # within the 33 % limit
    WARNING = "warning"  # up to 50 %
    DANGER = "danger"


@dataclass(frozen=True)
class CalculationResult:
    """
    Rounded results of a cable calculation.

    Attributes
    ----------
    total_area: float
        Total cross-sectional area of the installed cables, including
        insulation and sheath, in mm² (2 decimals).
    conductor_area: float
        Total cross-sectional area of the conductor metal in mm² (2 decimals).
    allowable_current: float
        Current-carrying capacity after grouping reduction in A (1 decimal).
    recommended_conduit: str
        Name of the recommended conduit, or the oversize label.
    fill_rate: float
        Fill rate of the recommended conduit in percent (1 decimal).
    install_method_desc: str
        Installation method, loaded conductors and grouping factor in words.
    """
    total_area: float
    conductor_area: float
    allowable_current: float
    recommended_conduit: str
    fill_rate: float
    install_method_desc: str

    @property
    def fill_status(self) -> FillStatus:
        if self.fill_rate <= 33.0:
            return FillStatus.SAFE
        if self.fill_rate <= 50.0:
            return FillStatus.WARNING
        return FillStatus.DANGER

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
