from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Insulation",
    "InsulationClass",
    "INSULATION_CLASSES"
]


@dataclass(frozen=True)
class Insulation:
    type: str
    T_max_cont: float   # degC
    T_amb_air: float    # degC, reference ambient of the ampacity tables
    T_amb_ground: float  # degC


class InsulationClass(StrEnum):
    """
    Thermal class of the conductor insulation. Selects the ampacity table
    (IEC 60364-5-52 Table B.52.4 for PVC, Table B.52.5 for XLPE).
    """
    PVC = "PVC"
    XLPE = "XLPE"

    @property
    def properties(self) -> Insulation:
        return INSULATION_CLASSES[self]


INSULATION_CLASSES: dict[str, Insulation] = {
    "PVC": Insulation("PVC", 70.0, 30.0, 20.0),
    "XLPE": Insulation("XLPE", 90.0, 30.0, 20.0)
}
