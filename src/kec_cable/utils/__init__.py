"""
Central place for general utilities used in kec-cable.
"""
from . import lookup_table

__all__ = [
    "lookup_table"
]
