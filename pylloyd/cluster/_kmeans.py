"""KMeansLloyd, a scikit-learn compatible estimator around Lloyd's algorithm."""

# License: BSD 3 clause

from typing import Union, Literal

import numpy as np
from scipy.spatial.distance import cdist
from sklearn.base import BaseEstimator, ClusterMixin, TransformerMixin
from sklearn.utils import check_array, check_random_state
from sklearn.exceptions import NotFittedError

from pylloyd.cluster._lloyd import lloyd, assign_labels
from pylloyd.metrics import within_cluster_sum_of_squares


class KMeansLloyd(BaseEstimator, ClusterMixin, TransformerMixin):
    """
    K-Means clustering with Lloyd's algorithm.

    Parameters
    ----------
    n_clusters : int, default=8
        The number of clusters to form and the number of centroids to generate.
        Must equal the number of rows if ```init``` is an array.
    init : Union[Literal['random'], np.ndarray], default = 'random'
        Method for initialization:
            - 'random', choose ```n_clusters``` distinct observations (rows) at
            random from data for the initial centroids.
            - If an ```np.ndarray``` is passed, it should be of shape
            ```(n_clusters, n_features)``` and gives the initial centers.
    max_iter : int, default=100
        Maximum number of iterations of the algorithm.
    tol : float, default=1e-4
        The algorithm stops if the sum of squared distances between old and new
        centers is less than this value.
    random_state : Union[int, np.random.RandomState, None], default = None
        Determines the random initialization and the re-initialization of
        empty clusters.
    n_jobs : Union[int, np.integer, None], default=None
        Number of parallel jobs for the assignment and update steps.

    Attributes
    ----------
    cluster_centers_ : np.ndarray of shape (n_clusters, n_features)
        Coordinates of the cluster centers.
    labels_ : np.ndarray of shape (n_samples, )
        0-based labels of each point.
    n_iter_ : int
        Number of iterations run.
    stop_reason_ : str
        One of 'stability', 'tolerance' or 'max_iter'.
    withinss_ : np.ndarray of shape (n_clusters, )
        Within-cluster sum of squares for each cluster.
    inertia_ : float
        Sum of ```withinss_```.
    """

    def __init__(self,
                 n_clusters: int = 8,
                 init: Union[Literal['random'], np.ndarray] = 'random',
                 max_iter: int = 100,
                 tol: float = 1e-4,
                 random_state: Union[int, np.random.RandomState, None] = None,
                 n_jobs: Union[int, np.integer, None] = None) -> None:
        """Construct the KMeansLloyd."""
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.tol = tol
        self.random_state = random_state
        self.n_jobs = n_jobs

    def fit(self, X: np.ndarray, y: None = None) -> ClusterMixin:
        """
        Compute k-means clustering.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : None
            Ignored.

        Returns
        -------
        self : returns a Fitted estimator.
        """
        X = check_array(X, dtype=np.float64)
        self._validate_hyperparameters()
        random_state = check_random_state(self.random_state)
        centers_init = self._init_centroids(X, random_state)

        self.cluster_centers_, self.labels_, self.n_iter_, self.stop_reason_ = \
            lloyd(X, centers_init, max_iter=self.max_iter, tol=self.tol,
                  random_state=random_state, n_jobs=self.n_jobs)
        self.withinss_ = within_cluster_sum_of_squares(
            X, self.labels_, self.cluster_centers_)
        self.inertia_ = float(np.sum(self.withinss_))
        self.n_features_in_ = X.shape[1]
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the closest cluster each sample in X belongs to.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        labels : ndarray of shape (n_samples,)
            Index of the cluster each sample belongs to.
        """
        X = self._check_test_data(X)
        return assign_labels(X, self.cluster_centers_, n_jobs=self.n_jobs)

    def transform(self, X: np.ndarray) -> np.ndarray:
        """
        Transform X to a cluster-distance space.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        X_new : ndarray of shape (n_samples, n_clusters)
            Euclidean distance of each sample to each cluster center.
        """
        X = self._check_test_data(X)
        return cdist(X, self.cluster_centers_, metric='euclidean')

    def score(self, X: np.ndarray, y: None = None) -> float:
        """Opposite of the total within-cluster sum of squares of X."""
        labels = self.predict(X)
        X = check_array(X, dtype=np.float64)
        return -float(np.sum(within_cluster_sum_of_squares(
            X, labels, self.cluster_centers_)))

    def _validate_hyperparameters(self) -> None:
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0, got %s." % self.max_iter)
        if self.tol < 0:
            raise ValueError("tol must be >= 0, got %s." % self.tol)

    def _init_centroids(self, X: np.ndarray,
                        random_state: np.random.RandomState) -> np.ndarray:
        if isinstance(self.init, str) and self.init == 'random':
            if not 1 <= self.n_clusters <= X.shape[0]:
                raise ValueError("n_clusters must be between 1 and n_samples={0}, "
                                 "got {1}.".format(X.shape[0], self.n_clusters))
            indices = random_state.choice(X.shape[0], size=self.n_clusters,
                                          replace=False)
            return X[indices, :]
        elif isinstance(self.init, np.ndarray):
            centers = check_array(self.init, dtype=np.float64)
            if centers.shape[1] != X.shape[1]:
                raise ValueError("Dimensions of X and initial centers do not match, "
                                 "got {0} != {1}.".format(X.shape[1], centers.shape[1]))
            if centers.shape[0] != self.n_clusters:
                raise ValueError("init has {0} centers, but n_clusters={1}."
                                 .format(centers.shape[0], self.n_clusters))
            return centers
        else:
            raise ValueError('invalid init value, got {0}.'.format(self.init))

    def _check_test_data(self, X: np.ndarray) -> np.ndarray:
        if not hasattr(self, 'cluster_centers_'):
            raise NotFittedError(self)
        X = check_array(X, dtype=np.float64)
        if X.shape[1] != self.n_features_in_:
            raise ValueError("X has {0} features, but KMeansLloyd is expecting "
                             "{1} features.".format(X.shape[1], self.n_features_in_))
        return X
