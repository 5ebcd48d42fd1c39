"""The :mod:`pylloyd.util` contains utilities for running and analyzing."""

# License: BSD 3 clause

from pylloyd.util._util import new_logger

__all__ = ['new_logger']
