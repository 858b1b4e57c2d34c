from math import pi, sqrt
from mock import sentinel, Mock, patch, call
import types
import unittest

from stereostation.config import StationConfig
from stereostation.samplers import ErrorlessSampler, GaussianSampler
from stereostation.simulations.base import (StationSimulation, EventResult,
                                            derive_seeds, main)
from stereostation.station import DetectionStation
from stereostation.truth import MCTruth


def make_station():
    config = StationConfig(n_sectors=6, radii=[2., 6., 12.],
                           phi_uv=[.1, .08], pitch_uv=[.05, .08],
                           phi_w=[pi / 2, pi / 2], pitch_w=[.1, .15],
                           sigma_r=[.05, .08], sigma_rphi=[.01, .015])
    return DetectionStation.from_config(config, MCTruth(), ErrorlessSampler())


class StationSimulationTest(unittest.TestCase):

    def setUp(self):
        self.station = make_station()
        self.simulation = StationSimulation(self.station, N=10,
                                            n_background=3, seed=1,
                                            progress=False)

    def test_init_sets_attributes(self):
        self.assertIs(self.simulation.station, self.station)
        self.assertEqual(self.simulation.N, 10)
        self.assertEqual(self.simulation.n_background, 3)
        self.assertEqual(self.simulation.results, [])

    @patch.object(StationSimulation, 'generate_event_positions')
    @patch.object(StationSimulation, 'simulate_event')
    def test_run(self, mock_simulate, mock_generate):
        mock_generate.return_value = [sentinel.positions1,
                                      sentinel.positions2]
        mock_simulate.return_value = sentinel.result
        self.simulation.run()

        expected = [call(0, sentinel.positions1), call(1, sentinel.positions2)]
        self.assertEqual(mock_simulate.call_args_list, expected)
        self.assertEqual(self.simulation.results,
                         [sentinel.result, sentinel.result])

    def test_generate_event_positions(self):
        output = self.simulation.generate_event_positions()
        self.assertIsInstance(output, types.GeneratorType)

        output = list(output)
        self.assertEqual(len(output), 10)
        for positions in output:
            self.assertEqual(len(positions), 4)

    def test_generate_hit_position(self):
        for _ in range(100):
            x, y = self.simulation.generate_hit_position()
            self.assertTrue(2. <= sqrt(x ** 2 + y ** 2) <= 12.)

    def test_seed(self):
        simulation = StationSimulation(self.station, seed=1, progress=False)
        self.assertEqual(simulation.generate_hit_position(),
                         self.simulation.generate_hit_position())

    def test_simulate_event_calls(self):
        station = Mock()
        station.z = 1.5
        station.digitize.return_value = True
        station.truth.signal_reconstructed = False
        station.truth.background = [sentinel.cluster]
        simulation = StationSimulation(station, progress=False)

        result = simulation.simulate_event(3, [(1., 2.), (3., 4.), (5., 6.)])

        station.truth.reset.assert_called_once_with()
        station.begin_event.assert_called_once_with()
        self.assertEqual(station.digitize.call_args_list,
                         [call(1., 2., 1.5, 0, is_background=True),
                          call(3., 4., 1.5, 1, is_background=True),
                          call(5., 6., 1.5, 2, is_background=False)])
        station.reconstruct.assert_called_once_with()
        self.assertEqual(result, EventResult(3, (5., 6.), None,
                                             [sentinel.cluster]))

    def test_simulate_event(self):
        x, y = self.station.sector(4).frame.to_lab(4., .3)
        result = self.simulation.simulate_event(0, [(x, y)])

        self.assertEqual(result.event_id, 0)
        self.assertEqual(result.true_signal, (x, y))
        self.assertAlmostEqual(result.reconstructed_signal[0], x)
        self.assertAlmostEqual(result.reconstructed_signal[1], y)
        self.assertEqual(result.clusters, [])

    def test_simulate_missed_signal(self):
        result = self.simulation.simulate_event(0, [(3.5, 1.), (50., 0.)])

        self.assertIsNone(result.reconstructed_signal)
        self.assertEqual([cluster.label for cluster in result.clusters], [0])

    def test_run_errorless(self):
        simulation = StationSimulation(self.station, N=50, seed=1,
                                       progress=False)
        simulation.run()

        self.assertEqual(len(simulation.results), 50)
        n_found = 0
        for result in simulation.results:
            if result.reconstructed_signal is not None:
                n_found += 1
                self.assertAlmostEqual(result.reconstructed_signal[0],
                                       result.true_signal[0])
                self.assertAlmostEqual(result.reconstructed_signal[1],
                                       result.true_signal[1])
        self.assertGreater(n_found, 45)


class DeriveSeedsTest(unittest.TestCase):

    def test_independent_seeds(self):
        seeds = derive_seeds(1)
        self.assertEqual(len(seeds), 2)
        self.assertNotEqual(seeds[0], seeds[1])

    def test_reproducible(self):
        self.assertEqual(derive_seeds(1), derive_seeds(1))
        self.assertNotEqual(derive_seeds(1), derive_seeds(2))

    def test_no_seed(self):
        self.assertEqual(derive_seeds(None, 3), [None, None, None])


class MainTest(unittest.TestCase):

    @patch('stereostation.simulations.base.print', create=True)
    def test_main(self, mock_print):
        argv = ['simulate_station', '-n', '20', '-b', '2', '--seed', '1',
                '--no-progress']
        with patch('sys.argv', argv):
            main()
        output = '\n'.join(args[0] for args, _ in mock_print.call_args_list)
        self.assertIn('3x1D stations', output)
        self.assertIn('Efficiency: ', output)
        self.assertIn('Ghost fraction: ', output)

    @patch('stereostation.simulations.base.print', create=True)
    @patch('stereostation.simulations.base.StationSimulation',
           wraps=StationSimulation)
    @patch('stereostation.simulations.base.GaussianSampler',
           wraps=GaussianSampler)
    def test_main_seeds(self, mock_sampler, mock_simulation, mock_print):
        """Smearing and hit positions use different random streams"""

        argv = ['simulate_station', '-n', '5', '--seed', '1',
                '--no-progress']
        with patch('sys.argv', argv):
            main()
        sampler_seed, position_seed = derive_seeds(1)
        mock_sampler.assert_called_once_with(sampler_seed)
        self.assertEqual(mock_simulation.call_args[0][3], position_seed)
        self.assertNotEqual(sampler_seed, position_seed)


if __name__ == '__main__':
    unittest.main()
