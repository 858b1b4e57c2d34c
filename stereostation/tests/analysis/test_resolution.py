import unittest
import warnings

import numpy as np
from numpy import testing

from stereostation.analysis import resolution
from stereostation.simulations.base import EventResult
from stereostation.truth import Cluster


class ReconstructionPerformanceTest(unittest.TestCase):

    def setUp(self):
        self.results = [
            EventResult(0, (3., 0.), (3.1, 0.), [Cluster(1., 1., 0., 0)]),
            EventResult(1, (0., 2.), (.1, 2.), [Cluster(1., 1., 0., 0),
                                                Cluster(2., 1., 0., 100000)]),
            EventResult(2, (5., 5.), None, [])]
        self.performance = resolution.ReconstructionPerformance(self.results)

    def test_efficiency(self):
        self.assertAlmostEqual(self.performance.efficiency(), 2 / 3.)

    def test_ghost_fraction(self):
        """One of the three background and two signal clusters is a ghost"""

        self.assertAlmostEqual(self.performance.ghost_fraction(), 1 / 5.)

    def test_no_results(self):
        performance = resolution.ReconstructionPerformance([])
        self.assertEqual(performance.efficiency(), 0.)
        self.assertEqual(performance.ghost_fraction(), 0.)

    def test_residuals(self):
        d_r, d_rphi = self.performance.residuals()
        testing.assert_almost_equal(d_r, [.1, np.sqrt(4.01) - 2.])
        testing.assert_almost_equal(d_rphi, [0., -.0999167], 6)

    def test_residuals_across_pi(self):
        results = [EventResult(0, (-3., .01), (-3., -.01), [])]
        performance = resolution.ReconstructionPerformance(results)
        d_r, d_rphi = performance.residuals()
        testing.assert_almost_equal(d_rphi, [.02], 4)

    def test_fit_resolution(self):
        residuals = np.random.RandomState(1).normal(0., .05, 10000)
        sigma = self.performance.fit_resolution(residuals)
        self.assertAlmostEqual(sigma, .05, 2)

    def test_failing_fit(self):
        """Check for correct warnings/errors for failing fit"""

        with self.assertRaises(RuntimeError) as cm:
            self.performance.fit_resolution(np.zeros(10))
        self.assertEqual(str(cm.exception),
                         "Number of data points not sufficient")

        with warnings.catch_warnings(record=True) as w:
            # clear the warnings from resolution module
            if hasattr(resolution, '__warningregistry__'):
                resolution.__warningregistry__ = {}
            warnings.simplefilter("always")
            resolutions = self.performance.find_resolutions()
        self.assertTrue(issubclass(w[0].category, UserWarning))
        self.assertEqual(resolutions, (-999, -999))

    def test_find_resolutions(self):
        random_state = np.random.RandomState(2)
        results = []
        for event_id in range(5000):
            r = random_state.uniform(3., 8.)
            phi = random_state.uniform(-np.pi, np.pi)
            d_r, d_rphi = random_state.normal(0., (.05, .01))
            reco = ((r + d_r) * np.cos(phi) - d_rphi * np.sin(phi),
                    (r + d_r) * np.sin(phi) + d_rphi * np.cos(phi))
            results.append(EventResult(event_id, (r * np.cos(phi),
                                                  r * np.sin(phi)),
                                       reco, []))
        performance = resolution.ReconstructionPerformance(results)
        sigma_r, sigma_rphi = performance.find_resolutions()
        self.assertAlmostEqual(sigma_r, .05, 2)
        self.assertAlmostEqual(sigma_rphi, .01, 3)


if __name__ == '__main__':
    unittest.main()
