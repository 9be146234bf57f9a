"""
Sizing routines for cables and conduits.
"""
from . import cable
from . import conduit

from .cable import *
from .conduit import *

__all__ = cable.__all__ + conduit.__all__ + ["cable", "conduit"]
