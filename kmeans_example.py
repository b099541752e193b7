"""Simple example clustering synthetic gaussian blobs with the local KMeans.

Fits both model variants, checks that predicting on the training data
reproduces the fit labels and prints a summary of each clustering.
"""

import logging

import numpy as np

from kmeans import DimensionMismatchError, KMeans, KMeansPlusPlus


def make_blobs(n_samples: int = 200, dim: int = 2, seed: int = 42) -> np.ndarray:
    rng = np.random.default_rng(seed)
    per_cluster = n_samples // 4
    centers = [(2.0, 0.3), (-2.0, 0.5), (12.0, 0.1), (-20.0, 0.3)]
    return np.vstack([
        rng.normal(loc=loc, scale=scale, size=(per_cluster, dim))
        for loc, scale in centers
    ])


def simple_example():
    """Simple example demonstrating K-means usage."""
    print("Simple KMeans Example")
    print("=" * 50)

    X = make_blobs()
    print(f"Using {X.shape[0]} samples with {X.shape[1]} features")

    for model_cls in (KMeans, KMeansPlusPlus):
        print(f"\nFitting {model_cls.__name__} with k=4...")
        km = model_cls(n_clusters=4, max_iter=50, random_state=42)
        labels = km.fit(X)

        info = km.get_cluster_info()
        print(f"Iterations: {info['n_iterations']}")
        print(f"Inertia: {info['inertia']:.2f}")
        print(f"Centroids kept: {info['n_centroids']}/{info['n_clusters']}")
        print(f"Cluster sizes: {info['cluster_sizes']}")
        print("Centroids:")
        print(np.round(km.centroids, 3))

        same = np.array_equal(km.predict(X), labels)
        print(f"Predict matches fit labels: {same}")

    try:
        km.predict(np.zeros((5, 3)))
    except DimensionMismatchError as e:
        print(f"\nRejected 3-feature input: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    simple_example()
