"""Geometric advection distributions for via etching and sidewall scallops."""

from __future__ import annotations

import math
import sys
from typing import Sequence

from .process_data import BoschProcessData

__all__ = ["ViaDistribution", "BoschDistribution"]

Coordinate = Sequence[float]
Bounds = tuple[float, float, float, float, float, float]

_MAX = sys.float_info.max


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _fmod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _check_dimension(dimension: int) -> int:
    if dimension not in (2, 3):
        raise ValueError(f"dimension must be 2 or 3, not {dimension!r}")
    return dimension


class ViaDistribution:
    """Box-shaped distribution that etches the via down to the trench bottom."""

    def __init__(self, data: BoschProcessData, dimension: int) -> None:
        self.dimension = _check_dimension(dimension)
        self.data = data
        self.taper_depth = data.trench_bottom - data.taper_start
        self.is_tapering = data.sidewall_tapering

    def depth(self, initial: Coordinate) -> float:
        """Etch depth below ``initial``, reduced towards the via edge when tapering."""
        data = self.data
        if not self.is_tapering or abs(data.taper_start) > abs(data.trench_bottom):
            return data.trench_bottom

        squared = sum(
            (initial[i] - data.mask_origin[i]) ** 2 for i in range(self.dimension - 1)
        )
        radius = max(0.0, math.sqrt(squared) - data.bottom_width)
        factor = max(1.0 - _div(radius, data.start_width - data.bottom_width), 0.0)
        return data.taper_start + factor * self.taper_depth

    def is_inside(
        self, initial: Coordinate, candidate: Coordinate, eps: float = 0.0
    ) -> bool:
        """Whether ``candidate`` can be reached from ``initial``."""
        data = self.data
        last = self.dimension - 1
        if any(
            abs(candidate[i] - initial[i]) > data.grid_delta + eps for i in range(last)
        ):
            return False
        return abs(candidate[last] - initial[last]) <= abs(data.trench_bottom) + eps

    def signed_distance(self, initial: Coordinate, candidate: Coordinate) -> float:
        """Signed distance of ``candidate`` from the box below ``initial``."""
        data = self.data
        last = self.dimension - 1
        distance = -_MAX
        for i in range(last):
            distance = max(abs(candidate[i] - initial[i]) - data.grid_delta, distance)
        vertical = abs(candidate[last] - initial[last])
        distance = max(vertical - abs(self.depth(initial)), distance)
        return -distance if data.trench_bottom < 0 else distance

    def bounds(self) -> Bounds:
        """Extent of the distribution around a point, as (min, max) pairs per axis."""
        data = self.data
        sign = -1.0 if data.trench_bottom < 0 else 1.0
        result = [0.0] * 6
        for i in range(self.dimension - 1):
            result[2 * i] = -data.grid_delta * sign
            result[2 * i + 1] = data.grid_delta * sign
        result[2 * (self.dimension - 1)] = -data.trench_bottom
        result[2 * (self.dimension - 1) + 1] = data.trench_bottom
        return tuple(result)  # type: ignore[return-value]


class BoschDistribution:
    """Lens-shaped distribution producing scallops on the via sidewalls."""

    scallop_top = 0.0
    numeric_eps = 1e-3

    def __init__(self, data: BoschProcessData, dimension: int) -> None:
        self.dimension = _check_dimension(dimension)
        self.data = data
        self.gradient = _div(
            1.0 - _div(data.bottom_width, data.start_width),
            abs(data.trench_bottom - data.taper_start),
        )
        self.taper_per_cycle = _div(1 - data.taper_ratio, 1 + data.taper_ratio)
        self.log_denom = _log(self.taper_per_cycle)
        self.delta_o2 = data.grid_delta / 2.0
        self.z_prefactor = abs(_div(2 * data.taper_ratio, data.depth_per_cycle))
        self.iso_rate = data.sausage_etch_rate if data.sausage_cycle > 0 else data.iso_rate

    def calc_z(self, n: float) -> float:
        """Depth below the taper start reached after ``n`` tapering cycles."""
        x = self.data.taper_ratio
        frac = _div(1 - x, 1 + x)
        first = _div(abs(self.data.depth_per_cycle), 1 + x)
        return first * _div(1 - _pow(frac, n), 1 - frac)

    def radius(self, z: float) -> float:
        """Signed scallop radius for a surface point at height ``z``."""
        data = self.data
        linear_factor = min(1 - self.gradient * (data.taper_start - z), 1.0)
        tolerance = self.delta_o2 + self.numeric_eps

        if z > self.scallop_top:
            return 0.0
        if abs(z + data.grid_delta - data.trench_bottom) < self.delta_o2:
            return data.iso_rate * linear_factor

        if data.sausage_cycle > 0:
            z_mod = _fmod(
                abs(z - self.scallop_top),
                abs(data.sausage_cycle * data.depth_per_cycle),
            )
            sausage_depth = abs((data.sausage_cycle - 1) * data.depth_per_cycle)
            if abs(z_mod - sausage_depth) < tolerance:
                return data.sausage_etch_rate

        if abs(z) < abs(data.taper_start) - self.delta_o2:
            z_mod = _fmod(abs(z - self.scallop_top), abs(data.depth_per_cycle))
            if abs(z_mod - abs(data.depth_per_cycle) / 2) < tolerance:
                return data.iso_rate
            return 0.0

        below = abs(z - data.taper_start)
        n_z = _div(_log(1 - below * self.z_prefactor), self.log_denom)
        nearest = self.calc_z(_round_half_away(n_z))
        if abs(below - nearest) < tolerance:
            return data.iso_rate * linear_factor
        return 0.0

    def is_inside(
        self, initial: Coordinate, candidate: Coordinate, eps: float = 0.0
    ) -> bool:
        """Whether ``candidate`` lies within the largest scallop around ``initial``."""
        squared = sum(
            (candidate[i] - initial[i]) ** 2 for i in range(self.dimension)
        )
        return math.sqrt(squared) <= abs(self.iso_rate) + eps

    def signed_distance(self, initial: Coordinate, candidate: Coordinate) -> float:
        """Signed distance of ``candidate`` from the scallop lens around ``initial``."""
        data = self.data
        dim = self.dimension
        current = self.radius(initial[dim - 1])
        current2 = current * current
        direction = -1.0 if data.iso_rate < 0 else 1.0

        v = [0.0, 0.0, 0.0]
        for i in range(dim):
            v[i] = abs(candidate[i] - initial[i])
            if i < dim - 1:
                v[i] += data.lateral_ratio * current * direction

        if abs(current) <= data.grid_delta:
            distance = max(max(abs(v[0]), abs(v[1])), abs(v[2])) - abs(current)
            return distance if current > 0 else -distance

        distance = _MAX
        for i in range(dim):
            y = v[(i + 1) % dim]
            z = v[(i + 2) % dim] if dim == 3 else 0.0
            x = current2 - y * y - z * z
            if x < 0.0:
                continue
            dir_radius = v[i] - math.sqrt(x)
            if abs(dir_radius) < abs(distance):
                distance = dir_radius
        return distance if data.iso_rate > 0 else -distance

    def bounds(self) -> Bounds:
        """Extent of the distribution around a point, as (min, max) pairs per axis."""
        result = [0.0] * 6
        for i in range(self.dimension - 1):
            result[2 * i] = -self.iso_rate
            result[2 * i + 1] = self.iso_rate
        result[2 * (self.dimension - 1)] = -self.iso_rate
        result[2 * self.dimension - 1] = self.iso_rate
        return tuple(result)  # type: ignore[return-value]