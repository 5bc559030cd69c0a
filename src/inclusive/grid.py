"""Evaluate inclusive observables on a grid of points in parallel with joblib."""

from __future__ import annotations

import numpy as np
from joblib import Parallel, delayed

OBSERVABLES = ("dsigma_dt", "dsigma_dM2", "dsigma_dx", "dsigma_dy2")


def _evaluate(model, observable, s, value):
    return getattr(model, observable)(s, value)


def parallel_xsection_grid(model, observable, s, points, n_jobs=-1, backend=None, verbose=0):
    """
    Return `observable(s, p)` for every p in `points` as a numpy array.

    Every task gets its own pickled copy of `model` (process backends), so
    evaluations never share mutable state.
    """
    if observable not in OBSERVABLES:
        raise ValueError(f"Unknown observable {observable!r}; choose one of {OBSERVABLES}")
    points = np.asarray(points, dtype=float)
    values = Parallel(n_jobs=n_jobs, backend=backend, verbose=verbose)(
        delayed(_evaluate)(model, observable, s, p) for p in points.ravel()
    )
    return np.asarray(values, dtype=float).reshape(points.shape)


__all__ = ["OBSERVABLES", "parallel_xsection_grid"]
