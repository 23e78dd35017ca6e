"""Name registry and array evaluation of the loop functions.

Every loop function is a scalar map. This module exposes them by name and
evaluates them over broadcast numpy arrays, optionally splitting the work
over a process pool (the evaluations are independent, so the split is
trivial).
"""

from __future__ import annotations

import logging
from functools import partial

import numpy as np

from loopfpy.barr_zee import F1, F1t, F2, F3, f_PS, f_S, f_sferm
from loopfpy.fafb import G3, G4, Fa, Fb
from loopfpy.functions.misc import map_parallel
from loopfpy.iabc import Iabc, Ixyz
from loopfpy.phi import Phi
from loopfpy.sfermion import F1C, F1N, F2C, F2N, F3C, F3N, F4C, F4N
from loopfpy.two_loop import FA, FS, FdHp, FlHp, FuHp, G, Gn

log = logging.getLogger(__name__)

# name -> (function, number of arguments)
FUNCTIONS = {
    "Phi": (Phi, 3),
    "Iabc": (Iabc, 3),
    "Ixyz": (Ixyz, 3),
    "Fa": (Fa, 2),
    "Fb": (Fb, 2),
    "G3": (G3, 1),
    "G4": (G4, 1),
    "F1C": (F1C, 1),
    "F2C": (F2C, 1),
    "F3C": (F3C, 1),
    "F4C": (F4C, 1),
    "F1N": (F1N, 1),
    "F2N": (F2N, 1),
    "F3N": (F3N, 1),
    "F4N": (F4N, 1),
    "f_PS": (f_PS, 1),
    "f_S": (f_S, 1),
    "f_sferm": (f_sferm, 1),
    "F1": (F1, 1),
    "F1t": (F1t, 1),
    "F2": (F2, 1),
    "F3": (F3, 1),
    "FS": (FS, 2),
    "FA": (FA, 2),
    "FlHp": (FlHp, 2),
    "FdHp": (FdHp, 5),
    "FuHp": (FuHp, 5),
    "G": (G, 3),
    "Gn": (Gn, 3),
}


def lookup(name: str):
    """Return ``(function, arity)`` registered under ``name``.

    Raises
    ------
    KeyError
        If no function of that name exists.
    """

    if name not in FUNCTIONS:
        raise KeyError(f"Unknown loop function {name!r}. Available: {', '.join(FUNCTIONS)}")
    return FUNCTIONS[name]


def evaluate(name: str, *args: float) -> float:
    """Evaluate the loop function ``name`` at one argument point."""

    func, arity = lookup(name)
    if len(args) != arity:
        raise TypeError(f"{name} takes {arity} arguments, got {len(args)}")
    if name == "Gn":
        return func(args[0], args[1], int(args[2]))
    return func(*args)


def _evaluate_columns(name: str, *columns: np.ndarray) -> np.ndarray:
    # module-level so that it can be pickled for the worker processes
    return np.array([evaluate(name, *point) for point in zip(*columns)], dtype=float)


def evaluate_array(name: str, *arrays, processes: int = 1) -> np.ndarray:
    """Evaluate a loop function over broadcast arrays.

    Parameters
    ----------
    name:
        Registered function name.
    *arrays:
        One array-like per function argument; they are broadcast against
        each other.
    processes:
        Number of worker processes. ``1`` evaluates in the calling process.

    Returns
    -------
    np.ndarray
        Float array of the broadcast shape.
    """

    _, arity = lookup(name)
    if len(arrays) != arity:
        raise TypeError(f"{name} takes {arity} arguments, got {len(arrays)}")

    broadcast = np.broadcast_arrays(*[np.asarray(a, dtype=float) for a in arrays])
    shape = broadcast[0].shape
    columns = [np.ravel(b) for b in broadcast]

    if processes > 1 and columns[0].shape[0] > 1:
        log.info(f"Evaluating {name} on {columns[0].shape[0]} points with {processes} processes")
        result = map_parallel(partial(_evaluate_columns, name), columns, processes)
    else:
        result = _evaluate_columns(name, *columns)

    return result.reshape(shape)


def vectorize(name: str):
    """Return a ``numpy.vectorize`` wrapper of the loop function ``name``."""

    func, _ = lookup(name)
    return np.vectorize(func, otypes=[float])
