"""Lloyd's algorithm: the assignment/update loop of standard k-means."""

# License: BSD 3 clause

import logging
from typing import Union, Tuple, NamedTuple, Literal

import numpy as np
from scipy.spatial.distance import cdist
from sklearn.utils import check_random_state
from joblib import Parallel, delayed


logger = logging.getLogger(__name__)

# Lies outside [0, n_clusters), so it never equals a real assignment.
_UNASSIGNED = -1


class LloydResult(NamedTuple):
    """
    Outcome of a run of Lloyd's algorithm.

    Attributes
    ----------
    centers : np.ndarray of shape (n_clusters, n_features)
        The final cluster centers.
    cluster : np.ndarray of shape (n_samples, )
        0-based index of the center each observation is assigned to.
    iterations_used : int
        Number of iterations performed.
    stop_reason : Literal['stability', 'tolerance', 'max_iter']
        Why the loop stopped.
    """

    centers: np.ndarray
    cluster: np.ndarray
    iterations_used: int
    stop_reason: Literal['stability', 'tolerance', 'max_iter']


def _nearest_center(X: np.ndarray, centers: np.ndarray) -> np.ndarray:
    # argmin returns the first minimum, exact ties go to the lowest index
    return cdist(X, centers, metric='sqeuclidean').argmin(axis=1)


def _partial_sums(X: np.ndarray, labels: np.ndarray,
                  n_clusters: int) -> Tuple[np.ndarray, np.ndarray]:
    sums = np.zeros((n_clusters, X.shape[1]))
    np.add.at(sums, labels, X)
    return sums, np.bincount(labels, minlength=n_clusters)


def assign_labels(X: np.ndarray, centers: np.ndarray,
                  n_jobs: Union[int, np.integer, None] = None) -> np.ndarray:
    """
    Assign each observation to the center with minimal squared Euclidean distance.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        The observations.
    centers : np.ndarray of shape (n_clusters, n_features)
        The current cluster centers.
    n_jobs : Union[int, np.integer, None], default=None
        If larger than 1, the observations are split into ```n_jobs``` chunks
        that are assigned in parallel using joblib.

    Returns
    -------
    labels : np.ndarray of shape (n_samples, )
        Index of the closest center for each observation.
    """
    if n_jobs is None or n_jobs < 2:
        return _nearest_center(X, centers)
    chunks = np.array_split(np.arange(X.shape[0]), n_jobs)
    labels = Parallel(n_jobs=n_jobs)(
        delayed(_nearest_center)(X[chunk, :], centers) for chunk in chunks)
    return np.concatenate(labels)


def update_centers(X: np.ndarray, labels: np.ndarray, n_clusters: int,
                   random_state: Union[int, np.random.RandomState, None] = None,
                   n_jobs: Union[int, np.integer, None] = None) \
        -> Tuple[np.ndarray, np.ndarray]:
    """
    Recompute each center as the mean of the observations assigned to it.

    A cluster without any observation is re-initialized to one observation
    drawn uniformly at random (with replacement) from X.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        The observations.
    labels : np.ndarray of shape (n_samples, )
        Current assignment of the observations.
    n_clusters : int
        The number of clusters.
    random_state : Union[int, np.random.RandomState, None], default=None
        Source of the draws for empty clusters.
    n_jobs : Union[int, np.integer, None], default=None
        If larger than 1, partial sums are accumulated in parallel using joblib
        and merged afterwards.

    Returns
    -------
    centers : np.ndarray of shape (n_clusters, n_features)
        The new cluster centers.
    reseeded : np.ndarray of shape (n_reseeded, )
        Ascending indices of the clusters that were empty and re-initialized.
    """
    random_state = check_random_state(random_state)
    if n_jobs is None or n_jobs < 2:
        centers, counts = _partial_sums(X, labels, n_clusters)
    else:
        chunks = np.array_split(np.arange(X.shape[0]), n_jobs)
        partials = Parallel(n_jobs=n_jobs)(
            delayed(_partial_sums)(X[chunk, :], labels[chunk], n_clusters)
            for chunk in chunks)
        centers = np.sum([sums for sums, _ in partials], axis=0)
        counts = np.sum([cnt for _, cnt in partials], axis=0)

    non_empty = counts > 0
    centers[non_empty, :] /= counts[non_empty, np.newaxis]

    reseeded = np.flatnonzero(~non_empty)
    for idx in reseeded:
        centers[idx, :] = X[random_state.randint(X.shape[0]), :]
    return centers, reseeded


def lloyd(X: np.ndarray, centers_init: np.ndarray, max_iter: int = 100,
          tol: float = 1e-4,
          random_state: Union[int, np.random.RandomState, None] = None,
          n_jobs: Union[int, np.integer, None] = None) -> LloydResult:
    """
    Run Lloyd's algorithm until convergence or until max_iter is reached.

    Each iteration assigns all observations and stops if no assignment
    changed. Otherwise, the centers are recomputed and the run stops if the
    summed squared movement of all centers is below ```tol```.

    The inputs are expected to be validated, see
    :class:`pylloyd.cluster.KMeansLloyd`.

    Parameters
    ----------
    X : np.ndarray of shape (n_samples, n_features)
        The observations. Not modified.
    centers_init : np.ndarray of shape (n_clusters, n_features)
        The initial cluster centers. Not modified.
    max_iter : int, default=100
        Maximum number of iterations.
    tol : float, default=1e-4
        Tolerance of the summed squared center movement.
    random_state : Union[int, np.random.RandomState, None], default=None
        Source of the draws for empty clusters.
    n_jobs : Union[int, np.integer, None], default=None
        Number of parallel jobs for the assignment and update steps.

    Returns
    -------
    result : LloydResult
        The final centers, the assignment, the iterations used and the stop reason.
    """
    random_state = check_random_state(random_state)
    centers = np.array(centers_init, dtype=float)
    n_clusters = centers.shape[0]
    labels = np.zeros(X.shape[0], dtype=int)
    previous_labels = np.full(X.shape[0], _UNASSIGNED, dtype=int)

    for iteration in range(max_iter):
        labels = assign_labels(X, centers, n_jobs=n_jobs)
        if np.array_equal(labels, previous_labels):
            logger.info('Assignment stable after %d iterations.', iteration)
            return LloydResult(centers, labels, iteration, 'stability')
        previous_labels = labels

        new_centers, reseeded = update_centers(
            X, labels, n_clusters, random_state=random_state, n_jobs=n_jobs)
        for idx in reseeded:
            logger.warning('Empty cluster in iteration %d - re-initializing '
                           'cluster %d', iteration, idx)

        center_change = np.sum((new_centers - centers) ** 2)
        logger.debug('Iteration %d: center change %g', iteration, center_change)
        centers = new_centers
        if center_change < tol:
            logger.info('Center change below tolerance after %d iterations.',
                        iteration + 1)
            return LloydResult(centers, labels, iteration + 1, 'tolerance')

    logger.info('Stopped at max_iter=%d.', max_iter)
    return LloydResult(centers, labels, max_iter, 'max_iter')
