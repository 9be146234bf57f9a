from .lookup_table import *
from .exceptions import *
