"""
Cable bundle calculation: areas, current-carrying capacity, conduit size.
"""
from . import exceptions, geometry, outer_diameter, ampacity, grouping
from . import models, derating, sizing, cable

from .exceptions import *
from .geometry import *
from .outer_diameter import *
from .ampacity import *
from .grouping import *
from .models import *
from .derating import *
from .sizing import *
from .cable import *

__all__ = (
    exceptions.__all__
    + geometry.__all__
    + outer_diameter.__all__
    + ampacity.__all__
    + grouping.__all__
    + models.__all__
    + derating.__all__
    + sizing.__all__
    + cable.__all__
)
