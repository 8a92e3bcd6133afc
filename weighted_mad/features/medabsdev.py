from dataclasses import dataclass

from ._base import BaseFeature
from ..mad import weighted_mad


@dataclass()
class MedianAbsoluteDeviation(BaseFeature):
    constant: float = 1.0

    def _eval(self, m, sigma=None):
        return weighted_mad(m, constant=self.constant)

    @property
    def size(self):
        return 1


__all__ = ("MedianAbsoluteDeviation",)
