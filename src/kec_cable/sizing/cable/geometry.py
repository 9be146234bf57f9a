import math

__all__ = ["circle_area"]


def circle_area(diameter: float) -> float:
    """
    Returns the area of a circle with the given diameter.

    The diameter must not be negative; this is not checked.
    """
    return math.pi * (diameter / 2.0) ** 2
