"""The :mod:`pylloyd.metrics` module includes clustering compactness metrics."""

# License: BSD 3 clause

from pylloyd.metrics._cluster import (within_cluster_sum_of_squares,
                                      total_within_cluster_sum_of_squares)

__all__ = ('within_cluster_sum_of_squares',
           'total_within_cluster_sum_of_squares')
