from dataclasses import dataclass
from typing import Collection

import numpy as np

from ._base import BaseFeature


@dataclass()
class _FeatureCollection(BaseFeature):
    features: Collection[BaseFeature] = ()

    def _eval(self, m, sigma=None):
        raise NotImplementedError("_eval is missed for Extractor")

    def _eval_and_fill(self, m, sigma, fill_value):
        return np.concatenate(
            [
                np.atleast_1d(feature(None, m, sigma, check=False, fill_value=fill_value))
                for feature in self.features
            ]
        )

    @property
    def size(self):
        return sum(feature.size for feature in self.features)


class Extractor:
    def __new__(cls, *args: BaseFeature):
        return _FeatureCollection(args)


__all__ = ("Extractor",)
