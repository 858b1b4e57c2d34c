"""Perform simulations of events in a stereo detection station.

:mod:`~stereostation.simulations.base`
    digitize and reconstruct generated events, with a command line
    interface

"""
from . import base

__all__ = ['base']
