"""Random sources for the station response

The station draws the radial and azimuthal measurement errors from a
sampler.  A sampler provides :meth:`sample_normal_pair`, returning two
independent standard normal samples.

"""
from itertools import cycle

import numpy as np


class GaussianSampler(object):

    """Draw standard normal samples from a numpy random state

    :param seed: seed for the pseudo-random number generator.

    """

    def __init__(self, seed=None):
        self.random_state = np.random.RandomState(seed)

    def sample_normal_pair(self):
        rx, ry = self.random_state.normal(0., 1., 2)
        return rx, ry


class ErrorlessSampler(object):

    """Sampler without measurement errors"""

    def sample_normal_pair(self):
        return 0., 0.


class SequenceSampler(object):

    """Replay a fixed sequence of sample pairs

    Useful to obtain deterministic station responses.  The sequence is
    repeated when it is exhausted.

    :param pairs: sequence of (rx, ry) tuples.

    """

    def __init__(self, pairs):
        self.pairs = list(pairs)
        self._pairs = cycle(self.pairs)

    def sample_normal_pair(self):
        return next(self._pairs)
