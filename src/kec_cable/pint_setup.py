from __future__ import annotations

import pint
from pint.facets.plain.quantity import PlainQuantity as Quantity

UNITS = pint.UnitRegistry()

Q_ = UNITS.Quantity

unit_definitions = [
    'fraction = [] = frac',
    'percent = 1e-2 frac = % = pct',
    'square_millimeter = millimeter ** 2 = mm2 = sqmm'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)


def magnitude(value: float | Quantity, units: str) -> float:
    """
    Returns the magnitude of `value` expressed in `units`. Plain numbers are
    taken to be expressed in `units` already.
    """
    if isinstance(value, Quantity):
        return value.to(units).m
    return float(value)


__all__ = ["UNITS", "Q_", "Quantity", "magnitude"]
