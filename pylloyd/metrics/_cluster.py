"""Metrics to assess the compactness of a clustering."""

# License: BSD 3 clause

import numpy as np
from sklearn.utils import check_consistent_length


def within_cluster_sum_of_squares(X: np.ndarray, labels: np.ndarray,
                                  centers: np.ndarray) -> np.ndarray:
    """
    Compute the within-cluster sum of squares for each cluster.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        The observations.
    labels : np.ndarray of shape (n_samples, )
        0-based cluster index of each observation.
    centers : np.ndarray of shape (n_clusters, n_features)
        The cluster centers.

    Returns
    -------
    withinss : np.ndarray of shape (n_clusters, )
        Sum of squared distances of the members of each cluster to its center.
        Clusters without members have a value of 0.
    """
    check_consistent_length(X, labels)
    squared_distances = np.sum((X - centers[labels, :]) ** 2, axis=1)
    return np.bincount(labels, weights=squared_distances,
                       minlength=centers.shape[0])


def total_within_cluster_sum_of_squares(X: np.ndarray, labels: np.ndarray,
                                        centers: np.ndarray) -> float:
    """Sum of :func:`within_cluster_sum_of_squares` over all clusters."""
    return float(np.sum(within_cluster_sum_of_squares(X, labels, centers)))
