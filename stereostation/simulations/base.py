"""Simulate events in a stereo detection station

Each simulated event consists of a number of background hits and one
signal hit, placed uniformly within the acceptance of the station.  The
hits are digitized, the event is reconstructed and the truth and
reconstructed positions are kept in :attr:`StationSimulation.results`.

Example usage::

    >>> from stereostation import DetectionStation, StationConfig, MCTruth
    >>> from stereostation.samplers import GaussianSampler
    >>> from stereostation.simulations.base import StationSimulation

    >>> station = DetectionStation.from_config(StationConfig.default(),
    ...                                        MCTruth(), GaussianSampler(1))
    >>> sim = StationSimulation(station, N=100, n_background=5, seed=1)
    >>> sim.run()

This module can also be run from the command line::

    $ simulate_station --events 1000 --background 5

"""
from collections import namedtuple
from math import sqrt, pi, cos, sin
import argparse
import logging

import numpy as np

from ..analysis.resolution import ReconstructionPerformance
from ..config import StationConfig
from ..samplers import GaussianSampler
from ..station import DetectionStation
from ..truth import MCTruth
from ..utils import pbar

logger = logging.getLogger('stereostation.simulations')

#: Outcome of one simulated event.  The reconstructed signal position is
#: None if no coincidence was found for the signal hit.
EventResult = namedtuple('EventResult', ['event_id', 'true_signal',
                                         'reconstructed_signal', 'clusters'])


class StationSimulation(object):

    """Simulate events in a single station

    :param station: :class:`~stereostation.station.DetectionStation`
        instance, its truth sink must be a
        :class:`~stereostation.truth.MCTruth`.
    :param N: number of events to simulate.
    :param n_background: number of background hits per event.
    :param seed: seed for the pseudo-random number generator of the hit
        positions.
    :param progress: if True, show a progressbar while simulating.

    """

    def __init__(self, station, N=1, n_background=0, seed=None,
                 progress=True):
        self.station = station
        self.N = N
        self.n_background = n_background
        self.progress = progress
        self.random_state = np.random.RandomState(seed)
        self.results = []

    def run(self):
        """Run the simulations."""

        logger.info('Simulating %d events with %d background hits.',
                    self.N, self.n_background)
        for event_id, positions in enumerate(self.generate_event_positions()):
            result = self.simulate_event(event_id, positions)
            self.results.append(result)
        logger.info('Finished simulating %d events.', self.N)

    def generate_event_positions(self):
        """Generate the hit positions of each event

        :return: generator of lists of (x, y) positions, the last
            position of each list is that of the signal hit.

        """
        for _ in pbar(range(self.N), show=self.progress):
            yield [self.generate_hit_position()
                   for _ in range(self.n_background + 1)]

    def generate_hit_position(self):
        """Generate a random position within the acceptance

        The position is uniformly distributed over the annulus between
        the innermost and outermost radius of the station.

        """
        r_min = self.station.radii[0]
        r_max = self.station.radii[-1]
        r = sqrt(self.random_state.uniform(r_min ** 2, r_max ** 2))
        phi = self.random_state.uniform(-pi, pi)
        return r * cos(phi), r * sin(phi)

    def simulate_event(self, event_id, positions):
        """Digitize and reconstruct one event

        Background hits get the labels 0 up to the number of background
        hits, the signal hit gets the next label.

        """
        station = self.station
        truth = station.truth
        truth.reset()
        station.begin_event()

        *background, signal = positions
        for label, (x, y) in enumerate(background):
            station.digitize(x, y, station.z, label, is_background=True)
        has_signal = station.digitize(signal[0], signal[1], station.z,
                                      len(background), is_background=False)
        station.reconstruct()

        if has_signal and truth.signal_reconstructed:
            reconstructed_signal = (truth.signal.x, truth.signal.y)
        else:
            reconstructed_signal = None

        return EventResult(event_id, signal, reconstructed_signal,
                           list(truth.background))


def derive_seeds(seed, n=2):
    """Derive independent seeds from a single seed

    :param seed: master seed, None for unpredictable seeds.
    :param n: number of seeds to derive.
    :return: list of seeds, or of Nones if the master seed is None.

    """
    if seed is None:
        return [None] * n
    return [int(s) for s in
            np.random.RandomState(seed).randint(0, 2 ** 31 - 1, size=n)]


def main():
    descr = ('Simulate events in a stereo detection station and report the '
             'reconstruction performance.')
    parser = argparse.ArgumentParser(description=descr)
    parser.add_argument('--config', help='JSON file with the station layout, '
                        'by default the layout shipped with the package.')
    parser.add_argument('-n', '--events', type=int, default=1000,
                        help='number of events to simulate')
    parser.add_argument('-b', '--background', type=int, default=0,
                        help='number of background hits per event')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for the random number generators')
    parser.add_argument('--no-progress', dest='progress',
                        action='store_false', help='hide the progressbar')
    args = parser.parse_args()

    if args.config:
        config = StationConfig.from_json(args.config)
    else:
        config = StationConfig.default()
    sampler_seed, position_seed = derive_seeds(args.seed)
    station = DetectionStation.from_config(config, MCTruth(),
                                           GaussianSampler(sampler_seed))
    print(station.describe())

    sim = StationSimulation(station, args.events, args.background,
                            position_seed, args.progress)
    sim.run()

    performance = ReconstructionPerformance(sim.results)
    sigma_r, sigma_rphi = performance.find_resolutions()
    print('Efficiency: %.3f' % performance.efficiency())
    print('Ghost fraction: %.3f' % performance.ghost_fraction())
    print('Resolution R: %.4f, R-phi: %.4f' % (sigma_r, sigma_rphi))


if __name__ == '__main__':
    main()
