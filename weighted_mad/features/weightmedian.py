from ._base import BaseFeature
from ..median import weighted_median


class WeightedMedian(BaseFeature):
    def _eval(self, m, sigma=None):
        return weighted_median(m, self._weights(sigma))

    @property
    def size(self):
        return 1


__all__ = ("WeightedMedian",)
