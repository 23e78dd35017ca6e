"""Benchmarks for the loop functions.

Times every registered function on a small fixed grid that mixes generic
points with the degenerate configurations (arguments at zero, at one, and
equal to each other) where the expansions take over.
"""

from __future__ import annotations

import argparse
import logging
import os
from functools import partial

import numpy as np
import pyperf

from loopfpy.batch import FUNCTIONS, evaluate_array

# generic points plus points right at and next to the special configurations
SAMPLE_POINTS = np.array([0.0, 1e-8, 0.1, 0.25, 0.5, 0.999, 1.0, 1.001, 2.0, 10.0])


def _set_reproducible_thread_env() -> None:
    """Pin the BLAS and OpenMP pools to one thread unless the caller set them.

    The loop functions are scalar, so threads only add timing noise.
    """
    for key in ("OMP_NUM_THREADS", "MKL_NUM_THREADS", "OPENBLAS_NUM_THREADS", "NUMEXPR_NUM_THREADS"):
        os.environ.setdefault(key, "1")


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    if args.functions:
        cmd.extend(["--functions", args.functions])
    cmd.extend(["--processes", str(args.processes)])
    if args.log_quiet:
        cmd.append("--log-quiet")


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark loop-function evaluation on a mixed grid",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--functions",
        type=str,
        default="",
        help="Comma separated function names (all registered functions if empty)",
    )
    parser.add_argument(
        "--processes",
        type=int,
        default=1,
        help="Worker processes for the grid evaluation",
    )
    parser.add_argument(
        "--log-quiet",
        dest="log_quiet",
        action="store_true",
        help="Suppress domain-error and divergence logging",
    )

    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        processes=1,
        warmups=1,
    )
    return runner, parser


def sample_grid(arity: int) -> list[np.ndarray]:
    """Flattened outer product of ``SAMPLE_POINTS`` with itself ``arity`` times."""
    mesh = np.meshgrid(*([SAMPLE_POINTS] * arity), indexing="ij")
    return [np.ravel(m) for m in mesh]


def main() -> None:
    """CLI entry point for the loop-function benchmark."""
    _set_reproducible_thread_env()

    runner, _ = _build_runner()
    args = runner.parse_args()

    if args.log_quiet:
        logging.getLogger().setLevel(logging.CRITICAL)

    names = [n.strip() for n in args.functions.split(",") if n.strip()] or list(FUNCTIONS)

    for name in names:
        if name == "Gn":
            # one quadrature per point
            grid = [np.array([0.1, 1.0, 4.0]), np.array([0.5, 1.0, 2.0]), np.array([0.0, 1.0, 2.0])]
        elif name in ("FdHp", "FuHp"):
            # masses on the grid, physical quark charges
            grid = sample_grid(3) + [np.array(-1.0 / 3.0), np.array(2.0 / 3.0)]
        else:
            grid = sample_grid(FUNCTIONS[name][1])
        runner.bench_func(
            f"loopf_{name}",
            partial(evaluate_array, processes=args.processes),
            name,
            *grid,
        )


if __name__ == "__main__":
    main()
