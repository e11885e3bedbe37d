"""Parameters shared by the stages of a Bosch etch simulation."""

from __future__ import annotations

import sys
from dataclasses import dataclass

__all__ = ["BoschProcessData"]


@dataclass
class BoschProcessData:
    """All geometric and process parameters of a Bosch etch."""

    num_cycles: int = 0
    iso_rate: float = 0.0
    start_width: float = 0.0
    bottom_width: float = 0.0
    taper_start: float = sys.float_info.max
    top_offset: float = 0.0
    mask_origin: tuple[float, float, float] = (0.0, 0.0, 0.0)
    sidewall_tapering: bool = True
    scallop_decrease: bool = True
    depth_per_cycle: float = 0.0
    num_taper_cycles: int = 0
    taper_ratio: float = 0.0
    trench_bottom: float = 0.0
    grid_delta: float = 0.0
    sausage_cycle: int = 0
    sausage_etch_rate: float = 0.0
    is_wall_tapering: bool = True
    lateral_ratio: float = 0.0

    @staticmethod
    def lateral_ratio_from_etch_ratio(ratio: float) -> float:
        """Convert a lateral etch ratio into the stored lens ratio, clamped to [0, 1]."""
        return max(min(1.0 - ratio, 1.0), 0.0)