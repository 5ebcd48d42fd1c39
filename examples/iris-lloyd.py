"""
Lloyd's algorithm on the iris dataset, compared to scikit-learn's KMeans.
"""
import logging
import time

import numpy as np
from sklearn.cluster import KMeans
from sklearn.datasets import load_iris
from sklearn.metrics import adjusted_rand_score

from pylloyd.cluster import KMeansLloyd


logging.basicConfig(level=logging.INFO)


def main():
    X, y = load_iris(return_X_y=True)
    centers_init = X[np.random.RandomState(123).choice(X.shape[0], 3, replace=False), :]

    runtime = [time.time()]
    km = KMeansLloyd(n_clusters=3, init=centers_init, max_iter=100, tol=1e-4,
                     random_state=42).fit(X)
    runtime.append(time.time())
    print('pylloyd: {0} s, {1} iterations ({2})'.format(
        np.diff(runtime[-2:]), km.n_iter_, km.stop_reason_))

    reference = KMeans(n_clusters=3, init=centers_init, n_init=1, max_iter=100,
                       algorithm='lloyd').fit(X)
    runtime.append(time.time())
    print('sklearn: {0} s'.format(np.diff(runtime[-2:])))

    print('centers:\n{0}'.format(km.cluster_centers_))
    print('withinss: {0}, tot.withinss: {1}'.format(km.withinss_, km.inertia_))
    print('ARI vs. sklearn: {0}'.format(adjusted_rand_score(km.labels_,
                                                            reference.labels_)))
    print('ARI vs. species: {0}'.format(adjusted_rand_score(km.labels_, y)))


if __name__ == "__main__":
    main()
