"""Argument normalization shared by the median and MAD estimators.

All helpers return fresh arrays or views; caller data is never modified.
"""

from enum import Enum

import numpy as np


class MissingPolicy(Enum):
    """What to do with missing (``NaN``) values.

    ``DROP`` removes them before the computation, ``PROPAGATE`` makes the
    whole result missing, and ``UNCHECKED`` skips the check altogether, so
    the caller is responsible for passing clean data.
    """

    DROP = "drop"
    PROPAGATE = "propagate"
    UNCHECKED = "unchecked"

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        choices = ", ".join(repr(p.value) for p in cls)
        raise ValueError("na_rm must be a MissingPolicy or one of {}, got {!r}".format(choices, value))


def as_sample(x):
    x = np.asarray(x)
    if x.dtype == bool or not np.issubdtype(x.dtype, np.number):
        x = x.astype(float)
    if x.ndim != 1:
        raise ValueError("x must be one-dimensional, got {} dimension(s)".format(x.ndim))
    return x


def as_index(idxs):
    idxs = np.asarray(idxs)
    if idxs.dtype != bool:
        idxs = idxs.astype(np.intp, copy=False)
    return idxs


def subset(a, idxs):
    if idxs is None:
        return a
    return a[as_index(idxs)]


def scalar(value, name):
    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype == bool or not np.issubdtype(arr.dtype, np.number):
        raise ValueError("{} must be a single number, got {!r}".format(name, value))
    return arr.item()


def optional_scalar(value, name):
    if value is None:
        return None
    return scalar(value, name)


def prepare_unweighted(x, idxs, policy):
    """Subset ``x`` and apply the missing value policy

    Returns ``None`` when a missing value has to be propagated.
    """
    x = subset(as_sample(x), idxs)
    if policy is MissingPolicy.DROP:
        x = x[~np.isnan(x)]
    elif policy is MissingPolicy.PROPAGATE and np.any(np.isnan(x)):
        return None
    return x


def prepare_weighted(x, w, idxs, policy):
    """Clean a sample and its weights before a weighted estimate

    Lengths of ``x`` and ``w`` are checked before subsetting. Entries with
    non-positive (or ``NaN``) weight are dropped, then the missing value
    policy is applied. If any weight is infinite only the infinite-weight
    entries are kept, with unit weights.

    Returns ``(x, w)``, or ``None`` when a missing value has to be
    propagated.
    """
    x = as_sample(x)
    w = np.asarray(w, dtype=float)
    if w.ndim != 1:
        raise ValueError("w must be one-dimensional, got {} dimension(s)".format(w.ndim))
    if w.size != x.size:
        raise ValueError(
            "The number of elements in arguments 'w' and 'x' does not match: {} != {}".format(w.size, x.size)
        )
    if idxs is not None:
        idxs = as_index(idxs)
        x = x[idxs]
        w = w[idxs]

    positive = w > 0
    if not np.all(positive):
        x = x[positive]
        w = w[positive]

    if policy is MissingPolicy.DROP:
        keep = ~np.isnan(x)
        x = x[keep]
        w = w[keep]
    elif policy is MissingPolicy.PROPAGATE and np.any(np.isnan(x)):
        return None

    infinite = np.isinf(w)
    if np.any(infinite):
        x = x[infinite]
        w = np.ones(x.size)

    return x, w


def apply_along(func, x, w, rows, cols, axis, **kwargs):
    """Evaluate ``func(line, w, **kwargs)`` for every row (axis=1) or column (axis=0)"""
    x = np.asarray(x)
    if x.ndim != 2:
        raise ValueError("x must be a two-dimensional array, got {} dimension(s)".format(x.ndim))
    if rows is not None:
        x = x[as_index(rows), :]
    if cols is not None:
        x = x[:, as_index(cols)]

    if w is not None:
        w = subset(np.asarray(w), cols if axis == 1 else rows)
        if w.size != x.shape[axis]:
            raise ValueError(
                "The number of weights does not match the number of {}: {} != {}".format(
                    "columns" if axis == 1 else "rows", w.size, x.shape[axis]
                )
            )

    lines = x if axis == 1 else x.T
    return np.array([func(line, w, **kwargs) for line in lines], dtype=float)
