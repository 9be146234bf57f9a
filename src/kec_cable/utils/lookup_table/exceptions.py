__all__ = [
    "LookupTableError",
    "DataNotFoundError",
    "RowheaderNotFoundError",
    "ColumnheaderNotFoundError",
]


class LookupTableError(KeyError):
    """Base class of the lookup failures raised by `LookupTable`."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class DataNotFoundError(LookupTableError):
    pass


class RowheaderNotFoundError(LookupTableError):
    pass


class ColumnheaderNotFoundError(LookupTableError):
    pass
