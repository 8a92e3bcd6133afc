from dataclasses import dataclass

from ._base import BaseFeature
from ..mad import NORMAL_CONSTANT, weighted_mad


@dataclass()
class WeightedMedianAbsoluteDeviation(BaseFeature):
    constant: float = NORMAL_CONSTANT

    def _eval(self, m, sigma=None):
        return weighted_mad(m, self._weights(sigma), constant=self.constant)

    @property
    def size(self):
        return 1


__all__ = ("WeightedMedianAbsoluteDeviation",)
