import warnings


class ExperimentalWarning(UserWarning):
    pass


def warn_experimental(msg):
    warnings.warn(msg, category=ExperimentalWarning, stacklevel=2)


__all__ = (
    "ExperimentalWarning",
    "warn_experimental",
)
