"""The :mod:`pylloyd.cluster` module includes Lloyd's k-means algorithm."""

# License: BSD 3 clause

from pylloyd.cluster._lloyd import (LloydResult, assign_labels, update_centers,
                                    lloyd)
from pylloyd.cluster._kmeans import KMeansLloyd

__all__ = ('KMeansLloyd',
           'LloydResult',
           'assign_labels',
           'update_centers',
           'lloyd')
