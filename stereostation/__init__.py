"""Simulation and reconstruction of stereo strip/wire detection stations

A station is tiled into angular/radial sectors, each read out by three
one dimensional measurement planes (U, V and W) at different
orientations.  Hits are digitized into channels on the planes and space
points are reconstructed by matching the channels of the three planes.

The following packages and modules are included:

:mod:`~stereostation.analysis`
    package containing analysis-related modules

:mod:`~stereostation.config`
    configuration of the station layout

:mod:`~stereostation.planes`
    one dimensional measurement planes

:mod:`~stereostation.samplers`
    random sources for the measurement errors

:mod:`~stereostation.sectors`
    sector geometry and stereo line crossings

:mod:`~stereostation.simulations`
    package containing simulation-related modules

:mod:`~stereostation.station`
    digitization and reconstruction of a detection station

:mod:`~stereostation.tests`
    code tests

:mod:`~stereostation.transformations`
    transformations between coordinate systems

:mod:`~stereostation.truth`
    Monte Carlo truth bookkeeping

:mod:`~stereostation.utils`
    commonly used functions such as a progressbar

"""
from . import (
    analysis,
    config,
    planes,
    samplers,
    sectors,
    simulations,
    station,
    transformations,
    truth,
    utils,
)
from .analysis.resolution import ReconstructionPerformance
from .config import StationConfig
from .samplers import ErrorlessSampler, GaussianSampler, SequenceSampler
from .simulations.base import StationSimulation
from .station import DetectionStation
from .tests import run_tests
from .truth import MCTruth

__all__ = [
    'DetectionStation',
    'ErrorlessSampler',
    'GaussianSampler',
    'MCTruth',
    'ReconstructionPerformance',
    'SequenceSampler',
    'StationConfig',
    'StationSimulation',
    'analysis',
    'config',
    'planes',
    'run_tests',
    'samplers',
    'sectors',
    'simulations',
    'station',
    'transformations',
    'truth',
    'utils',
]
