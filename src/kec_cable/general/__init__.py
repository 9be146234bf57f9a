from .voltage_system import *
