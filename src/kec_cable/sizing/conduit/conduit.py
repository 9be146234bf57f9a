"""
Selection of the conduit size for a bundle of cables.

The smallest conduit is selected whose cross-sectional area, limited to the
maximum fill ratio of KEC 232.2 (one third), can hold the total area of the
cables.
"""
import warnings
from dataclasses import dataclass

import numpy as np

from ...config import SizingConfig, DEFAULT_CONFIG

__all__ = [
    "Conduit",
    "CONDUITS",
    "ConduitOversizeWarning",
    "recommend_conduit"
]


class ConduitOversizeWarning(UserWarning):
    pass


@dataclass(frozen=True)
class Conduit:
    name: str
    D_in: float  # inner diameter, mm

    @property
    def area(self) -> float:
        """Internal cross-sectional area in mm²."""
        return float(np.pi * (self.D_in / 2.0) ** 2)


# thick-walled steel conduit, ascending size
CONDUITS: tuple[Conduit, ...] = (
    Conduit("C16 (16mm)", 15.8),
    Conduit("C22 (22mm)", 21.0),
    Conduit("C28 (28mm)", 26.6),
    Conduit("C36 (36mm)", 35.0),
    Conduit("C42 (42mm)", 41.0),
    Conduit("C54 (54mm)", 53.0),
    Conduit("C70 (70mm)", 69.0),
    Conduit("C82 (82mm)", 80.0),
    Conduit("C92 (92mm)", 89.0),
    Conduit("C104 (104mm)", 101.0),
)

_AREAS = np.array([c.area for c in CONDUITS])


def recommend_conduit(
    total_area: float,
    config: SizingConfig | None = None
) -> tuple[str, float]:
    """
    Returns the name of the smallest conduit that can hold the given total
    cable area, and the resulting fill rate in percent.

    The fill rate is referred to the actual internal area of the selected
    conduit. If no conduit in the catalogue is large enough, the oversize
    label and fill rate of `config` are returned and a
    `ConduitOversizeWarning` is issued.

    Parameters
    ----------
    total_area: float
        Total cross-sectional area of the cables in mm².
    config: SizingConfig, optional
        Sizing settings. `DEFAULT_CONFIG` if None.

    Returns
    -------
    tuple[str, float]
        (conduit name, fill rate in percent)
    """
    config = config or DEFAULT_CONFIG
    available = _AREAS * config.max_fill_ratio
    fits = np.flatnonzero(available >= total_area)
    if fits.size == 0:
        warnings.warn(
            f"Total cable area {total_area:.1f} mm² exceeds the capacity of "
            f"the largest conduit {CONDUITS[-1].name}.",
            category=ConduitOversizeWarning
        )
        return config.oversize_conduit_label, config.oversize_fill_rate
    i = int(fits[0])
    fill_rate = total_area / float(_AREAS[i]) * 100.0
    return CONDUITS[i].name, fill_rate
