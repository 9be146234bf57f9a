"""
Installation methods of KEC / IEC 60364-5-52 (Table B.52.1 reference methods)
for which ampacity tables are available.
"""
from enum import StrEnum

__all__ = [
    "InstallationMethod",
    "INSTALL_METHOD_DESCRIPTIONS",
    "INSTALL_METHOD_LABELS",
    "SINGLE_CORE_METHODS",
    "MULTI_CORE_METHODS",
    "get_install_method_description"
]


class InstallationMethod(StrEnum):
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C = "C"
    D1 = "D1"
    D2 = "D2"
    E = "E"
    F = "F"

    @property
    def buried(self) -> bool:
        return self in (InstallationMethod.D1, InstallationMethod.D2)


INSTALL_METHOD_DESCRIPTIONS: dict[str, str] = {
    "A1": "Conduit in thermally insulating wall (insulated conductors/single-core cable)",
    "A2": "Conduit in thermally insulating wall (multi-core cable)",
    "B1": "Conduit on wall (insulated conductors/single-core cable)",
    "B2": "Conduit on wall (multi-core cable)",
    "C": "Fixed directly on wall/ceiling (in air)",
    "D1": "Buried duct",
    "D2": "Direct buried",
    "E": "Cable tray (perforated, single-core)",
    "F": "Cable tray (perforated, multi-core)",
}

# short labels offered in the option lists, "<code>: <label>"
INSTALL_METHOD_LABELS: dict[str, str] = {
    "A1": "A1: Conduit in insulating wall (single-core)",
    "A2": "A2: Conduit in insulating wall (multi-core)",
    "B1": "B1: Conduit on wall (single-core)",
    "B2": "B2: Conduit on wall (multi-core)",
    "C": "C: Fixed directly on wall/ceiling",
    "D1": "D1: Buried duct",
    "D2": "D2: Direct buried",
    "E": "E: Cable tray (single-core)",
    "F": "F: Cable tray (multi-core)",
}

SINGLE_CORE_METHODS = (
    InstallationMethod.A1,
    InstallationMethod.B1,
    InstallationMethod.C,
    InstallationMethod.D1,
    InstallationMethod.E
)

MULTI_CORE_METHODS = (
    InstallationMethod.A2,
    InstallationMethod.B2,
    InstallationMethod.C,
    InstallationMethod.D1,
    InstallationMethod.D2,
    InstallationMethod.F
)


def get_install_method_description(method: str) -> str:
    return INSTALL_METHOD_DESCRIPTIONS.get(method, "Other")
