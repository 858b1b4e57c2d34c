"""Analyse simulation results.

:mod:`~stereostation.analysis.resolution`
    efficiency, ghost fraction and position resolution of reconstructed
    signal hits

"""
from . import resolution

__all__ = ['resolution']
