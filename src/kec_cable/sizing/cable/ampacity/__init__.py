from .kec import *
from .kec import __all__
