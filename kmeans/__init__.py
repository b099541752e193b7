"""
K-means clustering (Lloyd's algorithm) for dense numeric data.

Example usage:
---------
    >>> import numpy as np
    >>> from kmeans import KMeans
    >>>
    >>> X = np.random.random((200, 2))
    >>> km = KMeans(n_clusters=4, max_iter=50, random_state=42)
    >>> labels = km.fit(X)
    >>> km.predict(X[:10])
"""

import logging

from .version import __version__
from .base import BaseKMeans, ClusterModel
from .kmeans import KMeans, KMeansPlusPlus
from .engine import fit_clusters
from .exceptions import (
    DimensionMismatchError,
    KMeansError,
    PredictError,
    PredictShapeError,
    ShapeMismatchError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KMeans",
    "KMeansPlusPlus",
    "BaseKMeans",
    "ClusterModel",
    "fit_clusters",
    "KMeansError",
    "ShapeMismatchError",
    "PredictError",
    "DimensionMismatchError",
    "PredictShapeError",
    "__version__",
]
