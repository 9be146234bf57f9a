from dataclasses import dataclass
from enum import StrEnum

from ..materials import InsulationClass

__all__ = [
    "CableType",
    "CableTypeInfo",
    "CABLE_TYPES",
    "CABLE_INSULATION",
    "list_cable_types"
]


class CableType(StrEnum):
    HFIX = "HFIX"
    TFR_CV = "TFR-CV"
    CV = "CV"
    FR_CV = "FR-CV"
    TFR_8 = "TFR-8"


@dataclass(frozen=True)
class CableTypeInfo:
    code: str
    name: str
    description: str
    max_temp: int  # degC
    insulation: str


CABLE_TYPES: tuple[CableTypeInfo, ...] = (
    CableTypeInfo(
        code="HFIX",
        name="HFIX (low-smoke halogen-free wire)",
        description="KS C 3341, low-toxicity flame-retardant polyolefin insulation",
        max_temp=90,
        insulation="XLPE"
    ),
    CableTypeInfo(
        code="TFR-CV",
        name="TFR-CV (flame-retardant tray cable)",
        description="0.6/1kV XLPE insulated, flame-retardant PVC sheathed",
        max_temp=90,
        insulation="XLPE"
    ),
    CableTypeInfo(
        code="CV",
        name="CV (general power cable)",
        description="0.6/1kV XLPE insulated, PVC sheathed",
        max_temp=90,
        insulation="XLPE"
    ),
    CableTypeInfo(
        code="FR-CV",
        name="FR-CV (fire-resistant cable)",
        description="0.6/1kV fire-resistant XLPE insulated",
        max_temp=90,
        insulation="XLPE"
    ),
    CableTypeInfo(
        code="TFR-8",
        name="TFR-8 (heat-resistant cable)",
        description="0.6/1kV heat-resistant XLPE insulated",
        max_temp=90,
        insulation="XLPE"
    ),
)

# cable types not listed here are rated as PVC (70 °C)
CABLE_INSULATION: dict[str, InsulationClass] = {
    "HFIX": InsulationClass.XLPE,
    "CV": InsulationClass.XLPE,
    "TFR-CV": InsulationClass.XLPE,
    "FR-CV": InsulationClass.XLPE,
    "TFR-8": InsulationClass.XLPE,
}


def list_cable_types() -> list[CableTypeInfo]:
    return list(CABLE_TYPES)
