"""Tests for cable cross-sectional area from the outer diameter."""

import math

import pytest

from kec_cable.sizing.cable import circle_area


def test_circle_area_zero():
    assert circle_area(0.0) == 0.0


@pytest.mark.parametrize("diameter", [1.0, 3.3, 18.0, 101.0])
def test_circle_area(diameter):
    assert circle_area(diameter) == pytest.approx(math.pi * diameter ** 2 / 4)
