import logging

import numpy as np
from multiprocessing import Pool


def domain_error(log: logging.Logger, message: str) -> float:
    """
    Report an out-of-domain argument and return a quiet NaN.

    Args:
        log (logging.Logger): Logger of the calling module.
        message (str): The diagnostic message.

    Returns:
        (float): ``nan``
    """
    log.error(message)
    return float("nan")


def sqr(x):
    """Return ``x`` squared."""
    return x * x


def pow3(x):
    """Return ``x`` cubed."""
    return x * x * x


def pow4(x):
    """Return ``x`` to the power four."""
    return sqr(sqr(x))


def is_zero(a: float, prec: float) -> bool:
    """
    Check whether a number vanishes within an absolute tolerance.

    Args:
        a (float): The value to test.
        prec (float): The absolute tolerance.

    Returns:
        (bool): True if ``|a| < prec``.
    """
    return abs(a) < prec


def is_equal(a: float, b: float, prec: float) -> bool:
    """
    Compare two numbers with a relative tolerance that has an absolute floor.

    The tolerance is scaled by ``1 + max(|a|, |b|)``, so comparisons stay
    meaningful for both small and large magnitudes.

    Args:
        a (float): The first value.
        b (float): The second value.
        prec (float): The relative tolerance.

    Returns:
        (bool): True if ``|a - b| < prec * (1 + max(|a|, |b|))``.
    """
    return is_zero(a - b, prec * (1.0 + max(abs(a), abs(b))))


def is_equal_rel(a: float, b: float, prec: float) -> bool:
    """
    Compare two positive numbers through their ratio.

    Unlike :func:`is_equal` the tolerance does not flatten out below one, so
    ``1e-5`` and ``5e-5`` are not considered equal.

    Args:
        a (float): The first value.
        b (float): The second value, non-zero.
        prec (float): The relative tolerance.

    Returns:
        (bool): True if ``is_equal(a/b, 1, prec)``.
    """
    return is_equal(a / b, 1.0, prec)


def sort2(a: float, b: float) -> tuple[float, float]:
    if a > b:
        return b, a
    return a, b


def sort3(a: float, b: float, c: float) -> tuple[float, float, float]:
    """
    Sort three values in ascending order.

    Args:
        a (float): The first value.
        b (float): The second value.
        c (float): The third value.

    Returns:
        (tuple): The values ``(smallest, middle, largest)``.
    """
    a, b = sort2(a, b)
    b, c = sort2(b, c)
    a, b = sort2(a, b)
    return a, b, c


def split_slices(n: int, parts: int) -> list[slice]:
    """
    Split ``range(n)`` into at most ``parts`` contiguous slices.

    Args:
        n (int): The number of elements.
        parts (int): The requested number of slices.

    Returns:
        (list): Non-empty slices covering ``range(n)`` in order.
    """
    slice_len = -(-n // parts)  # eq to ceil(n/parts)
    return [
        slice(i * slice_len, min((i + 1) * slice_len, n))
        for i in range(parts)
        if i * slice_len < n
    ]


def map_parallel(func, columns: list[np.ndarray], processes: int) -> np.ndarray:
    """
    Evaluate ``func`` over flat argument columns with a process pool.

    The columns are cut into ``processes`` slices and every slice is handed to
    one worker via ``Pool.starmap``. ``func`` has to be picklable, i.e. a
    module-level callable.

    Args:
        func (callable): Function taking one array per column.
        columns (list): Flat argument arrays of equal length.
        processes (int): Number of worker processes.

    Returns:
        (np.ndarray): The concatenated results.
    """
    n = columns[0].shape[0]
    arglist = [tuple(col[s] for col in columns) for s in split_slices(n, processes)]
    final_res = np.empty((0,))
    with Pool(processes) as f:
        res = f.starmap(func, arglist)
    for arr in res:
        final_res = np.append(final_res, np.ravel(arr), axis=0)
    return final_res
