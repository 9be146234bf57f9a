"""
Static catalogue of cable types, installation methods and option lists.
"""
from .cable_types import *
from .installation import *
from .options import *
