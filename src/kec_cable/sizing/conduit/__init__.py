"""
Conduit catalogue and conduit size recommendation.
"""
from .conduit import *
from .conduit import __all__
