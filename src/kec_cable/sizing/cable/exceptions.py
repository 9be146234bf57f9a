__all__ = [
    "CableSizingError",
    "InvalidCableSpec",
    "UnsupportedCableSpec",
    "UnsupportedAmpacityCombination"
]


class CableSizingError(Exception):
    pass


class InvalidCableSpec(CableSizingError, ValueError):
    """The cable bundle is malformed, e.g. a quantity below 1."""
    pass


class UnsupportedCableSpec(CableSizingError):
    """
    No outer diameter is known for the combination of cable type, core count
    and conductor size.
    """
    pass


class UnsupportedAmpacityCombination(CableSizingError):
    """
    No published current-carrying capacity exists for the combination of
    conductor size, insulation class and installation method.
    """
    pass
