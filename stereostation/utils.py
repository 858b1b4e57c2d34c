"""Utilities

The module contains some commonly used functions.

"""
from numpy import pi
from scipy.stats import norm
from progressbar import ProgressBar, ETA, Bar, Percentage


def pbar(iterable, length=None, show=True, **kwargs):
    """Get a new progressbar with our default widgets

    :param iterable: the iterable over which will be looped.
    :param length: in case iterable is a generator, this should be its
                   expected length.
    :param show: boolean, if False simply return the iterable.
    :return: a new iterable which iterates over the same elements as
             the input, but shows a progressbar if possible.

    """
    if not show:
        return iterable

    if length is None:
        try:
            length = len(iterable)
        except TypeError:
            pass

    if length:
        pb = ProgressBar(max_value=length,
                         widgets=[Percentage(), Bar(), ETA()], **kwargs)
        return pb(iterable)
    else:
        return iterable


def gauss(x, n, mu, sigma):
    """Gaussian distribution

    To be used for fitting where the integral is not 1.

    """
    return n * norm.pdf(x, mu, sigma)


def norm_angle(angle):
    """Normalize an angle to the range [0, 2 pi)

    Sector indices count counterclockwise from the x-axis, so azimuths
    are represented from 0 upto but not including 2 pi.

    """
    return angle % (2 * pi)
