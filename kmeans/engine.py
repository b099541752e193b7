"""
Lloyd's algorithm: the assign/update iteration behind every k-means model.

All functions work on dense float arrays of shape (n_samples, n_features)
and never modify their inputs.
"""

import logging
from typing import Tuple, Union

import numpy as np

from .exceptions import ShapeMismatchError

logger = logging.getLogger(__name__)


def euclidean_distances(X: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Compute the L2 distance between every centroid and every sample.

    Args:
        X: Data of shape (n_samples, n_features)
        centroids: Centroids of shape (n_centroids, n_features)

    Returns:
        Distances of shape (n_centroids, n_samples)
    """
    if centroids.ndim != 2 or centroids.shape[1] != X.shape[1]:
        raise ShapeMismatchError(
            f"centroids of shape {centroids.shape} do not match data with {X.shape[1]} features"
        )

    # (n_centroids, 1, n_features) - (1, n_samples, n_features)
    diff = X[np.newaxis, :, :] - centroids[:, np.newaxis, :]
    return np.sqrt(np.sum(diff * diff, axis=2))


def nearest_centroid(distances: np.ndarray) -> np.ndarray:
    """Index of the closest centroid for each sample; ties go to the lowest index."""
    if distances.shape[0] == 0:
        raise ShapeMismatchError("cannot assign labels: there are no centroids")
    # argmin returns the first occurrence of the minimum
    return np.argmin(distances, axis=0)


def compute_centroids(X: np.ndarray, labels: np.ndarray, n_clusters: int) -> np.ndarray:
    """
    Mean of the samples assigned to each cluster, in ascending cluster order.

    Clusters without members are left out, so the result can have fewer
    than ``n_clusters`` rows and the row of every cluster after an empty one
    moves up by one.

    Args:
        X: Data of shape (n_samples, n_features)
        labels: Cluster index of every sample
        n_clusters: Number of cluster indices to scan

    Returns:
        Centroids of shape (n_nonempty_clusters, n_features)
    """
    n_features = X.shape[1]
    rows = []

    for k in range(n_clusters):
        mask = labels == k
        if np.any(mask):
            rows.append(X[mask].mean(axis=0))
        else:
            logger.debug("Cluster %d is empty, dropping its centroid", k)

    if not rows:
        return np.empty((0, n_features), dtype=X.dtype)
    return np.vstack(rows)


def labels_converged(labels: np.ndarray, previous: np.ndarray) -> bool:
    """True when no sample changed cluster."""
    return np.array_equal(labels, previous)


def compute_inertia(X: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> float:
    """Within-cluster sum of squared distances."""
    assigned_centroids = centroids[labels]
    squared_distances = np.sum((X - assigned_centroids) ** 2, axis=1)
    return float(np.sum(squared_distances))


def fit_clusters(
    X: np.ndarray,
    initial_labels: np.ndarray,
    n_clusters: int,
    max_iter: int,
    return_n_iter: bool = False,
) -> Union[Tuple[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray, int]]:
    """
    Refine a labelling with Lloyd's iteration.

    Each pass recomputes the centroids from the current labels and then
    relabels every sample with its nearest centroid. Iteration stops when a
    pass leaves every label unchanged or after ``max_iter`` passes. The
    labels of the first check are compared against all zeros, so an
    all-zero initial labelling stops immediately.

    Args:
        X: Data of shape (n_samples, n_features)
        initial_labels: Starting cluster index of every sample
        n_clusters: Number of clusters
        max_iter: Maximum number of update passes
        return_n_iter: Whether to also return the number of passes run

    Returns:
        (labels, centroids) or (labels, centroids, n_iter). Every label is a
        valid row index into centroids.
    """
    if not isinstance(n_clusters, (int, np.integer)) or n_clusters < 1:
        raise ValueError(f"n_clusters must be a positive integer, got {n_clusters!r}")
    if not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter!r}")

    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
        raise ShapeMismatchError(f"expected a 2-D data array, got shape {X.shape}")

    n_samples = X.shape[0]
    labels = np.asarray(initial_labels, dtype=np.intp)
    if labels.shape != (n_samples,):
        raise ShapeMismatchError(
            f"initial_labels of shape {labels.shape} do not match {n_samples} samples"
        )
    if n_samples and (labels.min() < 0 or labels.max() >= n_clusters):
        raise ValueError(
            f"initial_labels must lie in [0, {n_clusters}), "
            f"got values from {labels.min()} to {labels.max()}"
        )

    previous = np.zeros(n_samples, dtype=np.intp)
    centroids = None
    n_iter = 0

    for iteration in range(max_iter):
        if labels_converged(labels, previous):
            logger.debug("Converged after %d iterations", iteration)
            break

        previous = labels
        centroids = compute_centroids(X, labels, n_clusters)
        labels = nearest_centroid(euclidean_distances(X, centroids))
        n_iter += 1

        logger.debug(
            "Iteration %d: %d centroids, %d labels changed",
            n_iter, len(centroids), int(np.count_nonzero(labels != previous)),
        )

    if centroids is None:
        # No pass ran; the labels are all zero, so cluster 0 is their mean.
        centroids = compute_centroids(X, labels, n_clusters)

    if return_n_iter:
        return labels, centroids, n_iter
    return labels, centroids
