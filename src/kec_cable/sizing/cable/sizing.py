"""
Implementation of the calculation routine for a bundle of low-voltage cables
installed in a conduit: total installed area, conductor area, current-carrying
capacity at installation conditions, recommended conduit and its fill rate.

The routine runs in a fixed order: resolve the outer diameter, accumulate the
cable areas (plus an optional ground wire), determine the ampacity, select the
conduit and round the results. A failing table lookup aborts the calculation
with an exception; no partial result is returned.

References
----------
KEC 232.2 (conduit fill), KEC / IEC 60364-5-52 Annex B (ampacity, grouping).
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from ...config import SizingConfig, DEFAULT_CONFIG
from ...catalogue import get_install_method_description
from ..conduit import recommend_conduit
from .geometry import circle_area
from .outer_diameter import get_outer_diameter, find_outer_diameter
from .derating import AmpacityData, get_derating, loaded_label
from .models import CableSpec, CalculationResult

__all__ = [
    "GROUND_WIRE_SIZES",
    "get_ground_wire_size",
    "ground_wire_area",
    "round_half_up",
    "calculate",
    "calculate_details"
]


logger = logging.getLogger(__name__)


# main conductor size -> size of the HFIX ground wire, mm²
GROUND_WIRE_SIZES: dict[str, str] = {
    "1.5": "1.5", "2.5": "1.5",
    "4": "2.5", "6": "2.5",
    "10": "6", "16": "6",
    "25": "16", "35": "16",
    "50": "25", "70": "25",
    "95": "35", "120": "35",
    "150": "70", "185": "70",
}


def get_ground_wire_size(size: str) -> str:
    """
    Returns the size of the ground wire that goes with the given main
    conductor size. Sizes above 185 mm² get a 95 mm² ground wire.
    """
    return GROUND_WIRE_SIZES.get(size, "95")


def ground_wire_area(size: str) -> float:
    """
    Returns the cross-sectional area in mm² of the single HFIX ground wire that
    goes with the given main conductor size, or 0.0 if the diameter of that
    wire is not known.
    """
    ground_size = get_ground_wire_size(size)
    D_pe = find_outer_diameter("HFIX", "1C", ground_size)
    if D_pe is None:
        logger.debug(f"No HFIX diameter for ground wire {ground_size} mm²; skipped.")
        return 0.0
    return circle_area(D_pe)


def round_half_up(value: float, decimals: int) -> float:
    """
    Rounds `value` to `decimals` places, halves away from zero.

    The value is scaled first and the scaled float is rounded, so a product
    such as 13.649999999999999 * 10 == 136.5 rounds up to 13.7.
    """
    scale = 10 ** decimals
    scaled = Decimal(value * scale).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(scaled) / scale


def calculate(
    spec: CableSpec,
    config: SizingConfig | None = None
) -> CalculationResult:
    """
    Calculates areas, current-carrying capacity and conduit size for the given
    cable bundle.

    Parameters
    ----------
    spec: CableSpec
        Cables to calculate.
    config: SizingConfig, optional
        Sizing settings. `DEFAULT_CONFIG` if None.

    Returns
    -------
    CalculationResult

    Raises
    ------
    UnsupportedCableSpec
        If no outer diameter is known for the cable type, core count and size.
    UnsupportedAmpacityCombination
        If no current-carrying capacity is published for the size, insulation
        class and installation method.
    """
    result, _ = calculate_details(spec, config)
    return result


def calculate_details(
    spec: CableSpec,
    config: SizingConfig | None = None
) -> tuple[CalculationResult, AmpacityData]:
    """
    Same as `calculate`, but also returns the unrounded intermediate results
    of the ampacity determination.

    Returns
    -------
    tuple[CalculationResult, AmpacityData]

    Raises
    ------
    UnsupportedCableSpec
        If no outer diameter is known for the cable type, core count and size.
    UnsupportedAmpacityCombination
        If no current-carrying capacity is published for the size, insulation
        class and installation method.
    """
    config = config or DEFAULT_CONFIG

    D = get_outer_diameter(spec.cable_type, spec.cores, spec.size)
    A_cable = circle_area(D)
    A_total = A_cable * spec.quantity
    A_cond = float(spec.size) * spec.quantity

    if spec.ground_wire:
        A_pe = ground_wire_area(spec.size)
        A_total += A_pe
        logger.debug(f"Ground wire adds {A_pe:.2f} mm².")

    derating = get_derating(spec)

    conduit, fill_rate = recommend_conduit(A_total, config)
    logger.debug(
        f"A_total = {A_total:.2f} mm² -> conduit {conduit}, "
        f"fill rate {fill_rate:.1f} %"
    )

    summary = (
        f"{get_install_method_description(derating.install_method)} / "
        f"{loaded_label(spec.system)} / "
        f"grouping factor: {derating.grouping_factor:.2f} "
        f"({derating.num_circuits} circuits)"
    )
    result = CalculationResult(
        total_area=round_half_up(A_total, config.area_decimals),
        conductor_area=round_half_up(A_cond, config.area_decimals),
        allowable_current=round_half_up(
            derating.current_capacity,
            config.current_decimals
        ),
        recommended_conduit=conduit,
        fill_rate=round_half_up(fill_rate, config.fill_decimals),
        install_method_desc=summary
    )
    return result, derating
