"""The :mod:`pylloyd.util` contains utilities for running and analyzing."""

# License: BSD 3 clause

import os
import logging


def new_logger(name: str, directory: str = os.getcwd(),
               level: int = logging.NOTSET) -> logging.Logger:
    """Register a new logger for logfiles."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(fmt='%(asctime)s %(levelname)s %(name)s %(message)s')
    handler = logging.FileHandler(os.path.join(directory, '{0}.log'.format(name)))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
