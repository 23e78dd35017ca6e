import argparse

from loopfpy.benchmark.bench_functions import SAMPLE_POINTS, _add_worker_args, sample_grid


def test_sample_grid():
    grid = sample_grid(2)

    assert len(grid) == 2
    assert grid[0].shape == (SAMPLE_POINTS.size**2,)


def test_worker_args_are_forwarded():
    cmd: list[str] = []
    _add_worker_args(cmd, argparse.Namespace(functions="Phi,Fa", processes=2, log_quiet=True))

    assert cmd == ["--functions", "Phi,Fa", "--processes", "2", "--log-quiet"]
