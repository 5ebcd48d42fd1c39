"""The :mod:`pylloyd` module implements k-means clustering with Lloyd's algorithm."""

# License: BSD 3 clause

from pylloyd import cluster, metrics, util

__all__ = ('cluster',
           'metrics',
           'util')
