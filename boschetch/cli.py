"""Command line sweep over mask ash times for a tapered Bosch etch."""

from __future__ import annotations

import argparse
from typing import Sequence

from .process import BoschProcess, re_from_ash_time
from .process_data import BoschProcessData

__all__ = ["main"]

_DEFAULT_ASH_TIMES = [0.0, 1.0, 1.2, 1.5, 2.0, 2.5, 4.0]
# Average of the measured etch rates per cycle.
_DEFAULT_ETCH_RATE = -(46 + 42 + 44 * 2) / (4 * 119.0)


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boschetch",
        description="Compute Bosch etch tapering parameters for several ash times.",
    )
    parser.add_argument("--grid-delta", type=float, default=0.025)
    parser.add_argument("--mask-radius", type=float, default=0.4)
    parser.add_argument("--cycles", type=int, default=100)
    parser.add_argument("--etch-rate", type=float, default=_DEFAULT_ETCH_RATE)
    parser.add_argument("--taper-start", type=float, default=-24.5)
    parser.add_argument("--lateral-ratio", type=float, default=0.5)
    parser.add_argument("--dimension", type=int, choices=(2, 3), default=2)
    parser.add_argument(
        "--ash-times", type=float, nargs="+", default=list(_DEFAULT_ASH_TIMES)
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ash-time sweep and print the derived parameters."""
    args = _parser().parse_args(argv)

    fractions = [re_from_ash_time(t) for t in args.ash_times]
    for fraction in fractions:
        print(_fmt(fraction))

    data = BoschProcessData(
        num_cycles=args.cycles,
        iso_rate=args.etch_rate * 0.6,
        depth_per_cycle=args.etch_rate,
        start_width=args.mask_radius,
        grid_delta=args.grid_delta,
        lateral_ratio=BoschProcessData.lateral_ratio_from_etch_ratio(
            args.lateral_ratio
        ),
    )
    process = BoschProcess(data, args.dimension)

    for fraction in fractions:
        data.bottom_width = args.mask_radius * fraction
        data.taper_start = args.taper_start
        print(f"r_e: {_fmt(fraction)}")
        try:
            process.prepare()
        except ValueError as exc:
            print(f"error: {exc}")
            return 1
        print(f"d_c: {_fmt(data.depth_per_cycle)}")
        print(f"N_t: {data.num_taper_cycles}")
        print(f"L_t: {_fmt(data.taper_start)}")
        print(f"r_e: {_fmt(data.bottom_width / data.start_width)}")
        print(f"x:   {_fmt(data.taper_ratio)}")
        print(f"L_b: {_fmt(data.trench_bottom)}")
    return 0