"""
Exceptions raised by the k-means engine and models.
"""


class KMeansError(Exception):
    """Base class for all errors raised by this package."""


class ShapeMismatchError(KMeansError, ValueError):
    """An array had rows or columns inconsistent with the data being clustered."""


class PredictError(KMeansError):
    """Base class for failures of ``predict``."""


class DimensionMismatchError(PredictError, ValueError):
    """
    Input passed to ``predict`` does not have the trained number of features.

    Args:
        n_features: Column count of the rejected input
        expected: Column count recorded by the last ``fit``
    """

    def __init__(self, n_features: int, expected: int):
        self.n_features = n_features
        self.expected = expected
        super().__init__(
            f"X has {n_features} features, but the model was fitted with {expected} features"
        )


class PredictShapeError(PredictError, ShapeMismatchError):
    """Distance computation failed inside ``predict``."""
