"""Testing for the KMeansLloyd estimator."""

import numpy as np
import pytest
from sklearn.base import clone, is_classifier
from sklearn.cluster import KMeans
from sklearn.datasets import load_iris
from sklearn.exceptions import NotFittedError
from sklearn.metrics import adjusted_rand_score

from pylloyd.cluster import KMeansLloyd


X_iris, y_iris = load_iris(return_X_y=True)
X_four = np.array([[0., 0.], [0., 1.], [10., 0.], [10., 1.]])


def test_matches_sklearn_kmeans() -> None:
    print('\ntest_matches_sklearn_kmeans():')
    centers_init = X_iris[[0, 50, 100], :]
    km = KMeansLloyd(n_clusters=3, init=centers_init, max_iter=100, tol=0.)
    km.fit(X_iris)
    reference = KMeans(n_clusters=3, init=centers_init, n_init=1, max_iter=100,
                       tol=0., algorithm='lloyd').fit(X_iris)
    print("pylloyd: {0}\nsklearn: {1}".format(km.cluster_centers_,
                                               reference.cluster_centers_))
    assert adjusted_rand_score(km.labels_, reference.labels_) == 1.
    np.testing.assert_allclose(km.cluster_centers_, reference.cluster_centers_,
                               atol=1e-6)
    np.testing.assert_allclose(km.inertia_, reference.inertia_, rtol=1e-6)


def test_fit_four_points() -> None:
    km = KMeansLloyd(n_clusters=2, init=np.array([[0., 0.], [10., 0.]]),
                     max_iter=10, tol=1e-9).fit(X_four)
    np.testing.assert_allclose(km.cluster_centers_, [[0., .5], [10., .5]])
    np.testing.assert_equal(km.labels_, [0, 0, 1, 1])
    np.testing.assert_allclose(km.withinss_, [.5, .5])
    np.testing.assert_allclose(km.inertia_, 1.)
    assert km.n_iter_ == 1
    assert km.stop_reason_ == 'stability'
    assert km.n_features_in_ == 2


def test_fit_predict() -> None:
    km = KMeansLloyd(n_clusters=2, init=np.array([[0., 0.], [10., 0.]]))
    np.testing.assert_equal(km.fit_predict(X_four), [0, 0, 1, 1])
    np.testing.assert_equal(km.predict([[1., 1.], [9., 0.]]), [0, 1])


def test_random_init_reproducible() -> None:
    km_a = KMeansLloyd(n_clusters=3, random_state=42).fit(X_iris)
    km_b = KMeansLloyd(n_clusters=3, random_state=42).fit(X_iris)
    np.testing.assert_equal(km_a.cluster_centers_, km_b.cluster_centers_)
    np.testing.assert_equal(km_a.labels_, km_b.labels_)
    assert km_a.cluster_centers_.shape == (3, 4)
    assert 0 <= km_a.n_iter_ <= 100


def test_transform() -> None:
    km = KMeansLloyd(n_clusters=3, random_state=42).fit(X_iris)
    distances = km.transform(X_iris)
    assert distances.shape == (X_iris.shape[0], 3)
    np.testing.assert_equal(distances.argmin(axis=1), km.predict(X_iris))
    np.testing.assert_allclose(
        distances[0, :], np.linalg.norm(km.cluster_centers_ - X_iris[0, :], axis=1))
    np.testing.assert_allclose(km.fit_transform(X_iris), km.transform(X_iris))


def test_score() -> None:
    km = KMeansLloyd(n_clusters=2, init=np.array([[0., 0.], [10., 0.]])).fit(X_four)
    np.testing.assert_allclose(km.score(X_four), -km.inertia_)


def test_parallel_fit() -> None:
    centers_init = X_iris[[0, 50, 100], :]
    km = KMeansLloyd(n_clusters=3, init=centers_init).fit(X_iris)
    km_parallel = KMeansLloyd(n_clusters=3, init=centers_init, n_jobs=2).fit(X_iris)
    np.testing.assert_equal(km_parallel.labels_, km.labels_)
    np.testing.assert_allclose(km_parallel.cluster_centers_, km.cluster_centers_)


def test_get_params_and_clone() -> None:
    km = KMeansLloyd(n_clusters=4, max_iter=20, tol=1e-3, random_state=1)
    params = km.get_params()
    print(params)
    assert params['n_clusters'] == 4
    assert params['max_iter'] == 20
    km_clone = clone(km).set_params(tol=1e-2)
    assert km_clone.tol == 1e-2
    assert km.tol == 1e-3
    assert not is_classifier(km)


def test_not_fitted() -> None:
    with pytest.raises(NotFittedError):
        KMeansLloyd().predict(X_iris)
    with pytest.raises(NotFittedError):
        KMeansLloyd().transform(X_iris)


@pytest.mark.parametrize("params", [
    {'max_iter': 0},
    {'max_iter': -1},
    {'tol': -1e-4},
    {'n_clusters': 5},
    {'n_clusters': 0},
    {'n_clusters': 2, 'init': np.zeros((2, 3))},
    {'n_clusters': 3, 'init': np.zeros((2, 2))},
    {'n_clusters': 2, 'init': np.array([[0., np.nan], [1., 1.]])},
    {'n_clusters': 2, 'init': 'k-means++'},
])
def test_invalid_params(params: dict) -> None:
    with pytest.raises(ValueError):
        KMeansLloyd(**params).fit(X_four)


def test_invalid_data() -> None:
    X = X_four.copy()
    X[0, 0] = np.nan
    with pytest.raises(ValueError):
        KMeansLloyd(n_clusters=2).fit(X)
    X[0, 0] = np.inf
    with pytest.raises(ValueError):
        KMeansLloyd(n_clusters=2).fit(X)
    with pytest.raises(ValueError):
        KMeansLloyd(n_clusters=1).fit(np.zeros((0, 2)))
    km = KMeansLloyd(n_clusters=2, init=np.array([[0., 0.], [10., 0.]])).fit(X_four)
    with pytest.raises(ValueError):
        km.predict(np.zeros((2, 3)))
