import numpy as np

from ._input import MissingPolicy, apply_along, prepare_unweighted, prepare_weighted

TIES = ("weighted", "min", "max", "mean")


def _interpolated_median(x, w):
    # Sorted values sit at the middle of their weight mass
    wcum = np.cumsum(w)
    p = (wcum - 0.5 * w) / wcum[-1]
    return np.interp(0.5, p, x)


def _tied_median(x, w, ties):
    wcum = np.cumsum(w)
    half = 0.5 * wcum[-1]
    k = np.searchsorted(wcum, half, side="left")
    if wcum[k] != half or k + 1 == x.size:
        return x[k]
    low, high = x[k], x[k + 1]
    if ties == "min":
        return low
    if ties == "max":
        return high
    if ties == "mean":
        return 0.5 * (low + high)
    return (w[k] * low + w[k + 1] * high) / (w[k] + w[k + 1])


def weighted_median(x, w=None, idxs=None, na_rm=MissingPolicy.UNCHECKED, interpolate=None, ties=None):
    """Weighted median of a sample

    Parameters
    ----------
    x : array-like
        One-dimensional sample.
    w : array-like or None
        Non-negative weights, same length as `x`. Non-positive weights
        exclude the entry, infinite weights make all finite-weight entries
        irrelevant. If None, the ordinary median is returned.
    idxs : array-like or None
        Integer positions or boolean mask selecting the entries to use.
    na_rm : MissingPolicy or str
        Missing values handling, see `MissingPolicy`.
    interpolate : bool or None
        Linearly interpolate between the sorted values placed at the middle
        of their weight mass. Defaults to True if `ties` is None.
    ties : str or None
        How to resolve a value exactly splitting the weight in halves when
        `interpolate` is False: "weighted", "min", "max" or "mean".

    Returns
    -------
    float
        The weighted median, or NaN if no entries are left or a missing
        value is propagated.
    """
    policy = MissingPolicy.coerce(na_rm)
    if interpolate is None:
        interpolate = ties is None
    if ties is None:
        ties = "weighted"
    if ties not in TIES:
        raise ValueError("ties must be one of {}, got {!r}".format(TIES, ties))

    if w is None:
        x = prepare_unweighted(x, idxs, policy)
        if x is None or x.size == 0:
            return np.nan
        return np.median(x)

    prepared = prepare_weighted(x, w, idxs, policy)
    if prepared is None:
        return np.nan
    x, w = prepared
    if x.size == 0:
        return np.nan
    if x.size == 1:
        return x[0]

    order = np.argsort(x, kind="stable")
    x = x[order]
    w = w[order]
    if interpolate:
        return _interpolated_median(x, w)
    return _tied_median(x, w, ties)


def row_weighted_medians(x, w=None, rows=None, cols=None, na_rm=MissingPolicy.UNCHECKED, interpolate=None, ties=None):
    """Weighted median of every row, `w` is indexed by columns"""
    return apply_along(
        weighted_median, x, w, rows, cols, axis=1, na_rm=na_rm, interpolate=interpolate, ties=ties
    )


def col_weighted_medians(x, w=None, rows=None, cols=None, na_rm=MissingPolicy.UNCHECKED, interpolate=None, ties=None):
    """Weighted median of every column, `w` is indexed by rows"""
    return apply_along(
        weighted_median, x, w, rows, cols, axis=0, na_rm=na_rm, interpolate=interpolate, ties=ties
    )


__all__ = (
    "weighted_median",
    "row_weighted_medians",
    "col_weighted_medians",
)
