"""Weighted median absolute deviation estimators

Functions operate on one-dimensional samples (`weighted_median`,
`weighted_mad`) or on rows and columns of matrices (`row_weighted_mads`,
`col_weighted_mads` and the median counterparts). Feature classes wrap the
same estimators into callables over ``(t, m, sigma)`` light curves.
"""

from ._input import MissingPolicy
from .mad import *
from .median import *
from .features import *
from .warnings import ExperimentalWarning

__version__ = "0.1.0"
