from dataclasses import dataclass, asdict


__all__ = ["SizingConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True)
class SizingConfig:
    """
    Configuration settings for cable and conduit sizing.
    """
    # Maximum ratio of total cable area to conduit area (KEC 232.2: 1/3).
    max_fill_ratio: float = 0.33

    # Decimal places of the packaged results.
    area_decimals: int = 2
    current_decimals: int = 1
    fill_decimals: int = 1

    # Reported when no conduit of the catalogue is large enough.
    oversize_conduit_label: str = "C104+ (larger conduit required)"
    oversize_fill_rate: float = 100.0

    def __post_init__(self):
        if not (0.0 < self.max_fill_ratio <= 1.0):
            raise ValueError("`max_fill_ratio` must be in (0, 1].")

    def __str__(self) -> str:
        d = asdict(self)
        s_list = []
        for k, v in d.items():
            if isinstance(v, float):
                s_list.append(f"{k}: {v:g}")
            else:
                s_list.append(f"{k}: {v}")
        return "\n".join(s_list)


DEFAULT_CONFIG = SizingConfig()
