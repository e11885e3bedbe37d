"""Parameter preparation for a Bosch etch and the distributions it applies."""

from __future__ import annotations

import dataclasses
import math
import sys

from .bisect import find_root
from .distributions import BoschDistribution, ViaDistribution
from .process_data import BoschProcessData

__all__ = ["BoschProcess", "re_from_ash_time"]

_ASH_P0 = 1.17506441
_ASH_P1 = 0.61536308
_ASH_P2 = -0.42438527
_ASH_T0 = _ASH_P1 / _ASH_P0 - _ASH_P2
_ASH_TM = _ASH_P1 / (_ASH_P0 - 1) - _ASH_P2


def re_from_ash_time(a_t: float) -> float:
    """Bottom-to-top width ratio of a via for a given mask ash time."""
    if a_t <= _ASH_T0:
        return 0.0
    if a_t >= _ASH_TM:
        return 1.0
    return _ASH_P0 - _ASH_P1 / (_ASH_P2 + a_t)


class BoschProcess:
    """Derives the tapering geometry of a Bosch etch and builds its distributions."""

    def __init__(self, data: BoschProcessData, dimension: int = 2) -> None:
        if dimension not in (2, 3):
            raise ValueError(f"dimension must be 2 or 3, not {dimension!r}")
        self.data = data
        self.dimension = dimension

    def taper_ratio_from_re(self, r_e: float) -> float:
        """Per-cycle taper ratio that narrows the via to ``r_e`` of its width."""
        n_t = self.data.num_taper_cycles

        def residual(x: float) -> float:
            return 1 - (1 - ((1 - x) / (1 + x)) ** n_t) * (1 + x) - r_e

        return find_root(residual, 1e-6, 1.0, eps=1e-9)

    def z_from_taper_ratio(self) -> float:
        """Depth covered by the tapering cycles below the taper start."""
        data = self.data
        x = data.taper_ratio
        frac = (1 - x) / (1 + x)
        return (
            data.depth_per_cycle
            / (1 + x)
            * (1 - frac ** (data.num_taper_cycles - 1))
            / (1 - frac)
        )

    def prepare(self) -> BoschProcessData:
        """Compute trench bottom, taper start and taper ratio in place."""
        data = self.data
        if data.start_width == 0:
            raise ValueError("start width must be non-zero")
        r_e = data.bottom_width / data.start_width
        data.trench_bottom = (
            data.depth_per_cycle * data.num_cycles
            + data.top_offset
            - data.grid_delta / 2.0
        )

        if abs(r_e - 1.0) < 1e-3:
            data.taper_start = -sys.float_info.max

        if abs(data.taper_start) < abs(data.trench_bottom):
            num_straight = int(math.ceil(data.taper_start / data.depth_per_cycle))
            data.num_taper_cycles = data.num_cycles - num_straight
            data.taper_start = (
                data.depth_per_cycle * num_straight
                + data.top_offset
                + data.depth_per_cycle / 2.0
            )
            data.taper_ratio = self.taper_ratio_from_re(r_e)
            data.trench_bottom = data.taper_start + self.z_from_taper_ratio()

        return data

    def distributions(self) -> tuple[ViaDistribution, BoschDistribution]:
        """The via and scallop distributions for the current parameters."""
        via = ViaDistribution(dataclasses.replace(self.data), self.dimension)
        bosch = BoschDistribution(dataclasses.replace(self.data), self.dimension)
        return via, bosch