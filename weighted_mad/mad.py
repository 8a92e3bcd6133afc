import numpy as np

from ._input import MissingPolicy, apply_along, optional_scalar, prepare_unweighted, prepare_weighted, scalar
from .median import weighted_median

# Makes MAD a consistent estimator of the standard deviation for normal data
NORMAL_CONSTANT = 1.4826


def weighted_mad(x, w=None, idxs=None, na_rm=MissingPolicy.UNCHECKED, constant=NORMAL_CONSTANT, center=None):
    """Weighted median absolute deviation

    Computes ``constant * weighted_median(|x - center|, w)`` where `center`
    defaults to ``weighted_median(x, w)``.

    Parameters
    ----------
    x : array-like
        One-dimensional sample.
    w : array-like or None
        Weights, same length as `x`. Non-positive weights exclude the entry.
        If any weight is infinite, only infinite-weight entries are used and
        they are equally weighted. If None, the ordinary MAD is computed.
    idxs : array-like or None
        Integer positions or boolean mask applied to both `x` and `w`.
    na_rm : MissingPolicy or str
        Missing values handling, see `MissingPolicy`. Default is
        `MissingPolicy.UNCHECKED` which assumes there are no NaNs.
    constant : float
        Scale factor.
    center : float or None
        Location to measure deviations from, estimated if None.

    Returns
    -------
    float
        NaN if no entries are left or a missing value is propagated, zero
        of the input type for a single entry.
    """
    policy = MissingPolicy.coerce(na_rm)
    constant = scalar(constant, "constant")
    center = optional_scalar(center, "center")

    if w is None:
        x = prepare_unweighted(x, idxs, policy)
        if x is None or x.size == 0:
            return np.nan
        if center is None:
            center = np.median(x)
        return constant * np.median(np.abs(x - center))

    prepared = prepare_weighted(x, w, idxs, policy)
    if prepared is None:
        return np.nan
    x, w = prepared
    if x.size == 0:
        return np.nan
    if x.size == 1:
        return x.dtype.type(0)

    if center is None:
        center = weighted_median(x, w)
    sigma = weighted_median(np.abs(x - center), w)
    return constant * sigma


def row_weighted_mads(
    x, w=None, rows=None, cols=None, na_rm=MissingPolicy.UNCHECKED, constant=NORMAL_CONSTANT, center=None
):
    """Weighted MAD of every row of a matrix

    `w` corresponds to columns and is subset by `cols` together with `x`.
    Returns an array with a value per retained row.
    """
    constant = scalar(constant, "constant")
    center = optional_scalar(center, "center")
    return apply_along(weighted_mad, x, w, rows, cols, axis=1, na_rm=na_rm, constant=constant, center=center)


def col_weighted_mads(
    x, w=None, rows=None, cols=None, na_rm=MissingPolicy.UNCHECKED, constant=NORMAL_CONSTANT, center=None
):
    """Weighted MAD of every column of a matrix

    `w` corresponds to rows and is subset by `rows` together with `x`.
    Returns an array with a value per retained column.
    """
    constant = scalar(constant, "constant")
    center = optional_scalar(center, "center")
    return apply_along(weighted_mad, x, w, rows, cols, axis=0, na_rm=na_rm, constant=constant, center=center)


__all__ = (
    "NORMAL_CONSTANT",
    "weighted_mad",
    "row_weighted_mads",
    "col_weighted_mads",
)
