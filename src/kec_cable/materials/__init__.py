"""
Material properties of cable insulation.
"""
from .insulation import *
