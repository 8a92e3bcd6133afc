from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from weighted_mad.warnings import warn_experimental


@dataclass
class BaseFeature(ABC):
    """Estimator callable over ``(t, m, sigma)`` samples

    Only magnitudes `m` and their errors `sigma` are used, `t` is accepted
    so features can be called the same way as time-series features and is
    passed through untouched. Errors are turned into ``sigma**-2`` weights.
    """

    @staticmethod
    def _normalize_input(*, m, sigma, check):
        m = np.asarray(m)
        if m.ndim != 1:
            raise ValueError("m must be one-dimensional, got {} dimension(s)".format(m.ndim))
        if sigma is not None:
            sigma = np.asarray(sigma)
            if sigma.shape != m.shape:
                raise ValueError("sigma and m must have the same length: {} != {}".format(sigma.size, m.size))
        if check:
            if np.any(~np.isfinite(m)):
                raise ValueError("m values must be finite")
            if sigma is not None and np.any(np.isnan(sigma)):
                raise ValueError("sigma must have no NaNs")
        return m, sigma

    @staticmethod
    def _weights(sigma):
        """Inverse variance weights, zero sigma gives infinite weight"""
        if sigma is None:
            return None
        with np.errstate(divide="ignore"):
            return np.power(np.asarray(sigma, dtype=float), -2.0)

    def _eval_and_fill(self, m, sigma, fill_value):
        try:
            a = self._eval(m, sigma)
            if np.any(~np.isfinite(a)):
                raise ValueError("{} is not finite".format(type(self).__name__))
            return a
        except (ValueError, ZeroDivisionError) as e:
            if fill_value is not None:
                return np.full(self.size, fill_value)
            raise e

    def __call__(self, t, m, sigma=None, check=True, fill_value=None):
        m, sigma = self._normalize_input(m=m, sigma=sigma, check=check)
        return self._eval_and_fill(m, sigma, fill_value)

    def __post_init__(self):
        cls = type(self)
        full_name = "{}.{}".format(cls.__module__, cls.__name__)
        warn_experimental("Feature {} is experimental".format(full_name))

    def many(self, samples, check=True, fill_value=None, n_jobs=-1):
        """Evaluate the feature for every ``(t, m, sigma)`` tuple

        Parallel execution is not supported, that's why `n_jobs=1` must be
        used
        """
        if n_jobs != 1:
            raise NotImplementedError("Parallel execution is not supported, use n_jobs=1")
        return np.stack([self(*sample, check=check, fill_value=fill_value) for sample in samples])

    @property
    @abstractmethod
    def size(self):
        pass

    @abstractmethod
    def _eval(self, m, sigma=None):
        pass
