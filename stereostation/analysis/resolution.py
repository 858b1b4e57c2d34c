"""Determine the reconstruction performance of simulated events

:class:`ReconstructionPerformance`
    efficiency, ghost fraction and position resolution of the
    reconstructed signal hits

"""
import warnings

import numpy as np
from scipy.optimize import curve_fit

from ..transformations import axes
from ..utils import gauss


class ReconstructionPerformance(object):

    """Reconstruction performance of a set of simulated events

    :param results: list of
        :class:`~stereostation.simulations.base.EventResult` tuples.

    """

    def __init__(self, results):
        self.results = results

    def efficiency(self):
        """Fraction of events in which the signal was reconstructed"""

        if not self.results:
            return 0.
        n_found = sum(result.reconstructed_signal is not None
                      for result in self.results)
        return n_found / len(self.results)

    def ghost_fraction(self):
        """Fraction of the reconstructed clusters which are ghosts

        The reconstructed signal clusters are included in the total.

        """
        n_clusters = 0
        n_ghosts = 0
        for result in self.results:
            n_clusters += len(result.clusters)
            n_ghosts += sum(cluster.is_ghost for cluster in result.clusters)
            if result.reconstructed_signal is not None:
                n_clusters += 1
        if not n_clusters:
            return 0.
        return n_ghosts / n_clusters

    def residuals(self):
        """Radial and azimuthal residuals of the reconstructed signal

        The azimuthal residual is expressed as a distance, at the radius
        of the true signal position.

        :return: arrays of radial and azimuthal residuals.

        """
        found = [result for result in self.results
                 if result.reconstructed_signal is not None]
        true_x, true_y = np.array([result.true_signal
                                   for result in found]).reshape(-1, 2).T
        reco_x, reco_y = np.array([result.reconstructed_signal
                                   for result in found]).reshape(-1, 2).T
        true_r, true_phi = axes.cartesian_to_polar(true_x, true_y)
        reco_r, reco_phi = axes.cartesian_to_polar(reco_x, reco_y)

        d_phi = (reco_phi - true_phi + np.pi) % (2 * np.pi) - np.pi
        return reco_r - true_r, true_r * d_phi

    def fit_resolution(self, residuals, bins=50):
        """Fit a normal distribution to the residuals

        :param residuals: array of residuals.
        :param bins: number of histogram bins.
        :return: width (sigma) of the fitted normal distribution.

        """
        n, edges = np.histogram(residuals, bins=bins)
        x = (edges[:-1] + edges[1:]) / 2.
        x = x.compress(n > 0)
        y = n.compress(n > 0)

        # sanity check: number of data points must be at least equal to
        # the number of fit parameters
        if len(x) < 3:
            raise RuntimeError("Number of data points not sufficient")

        width = edges[1] - edges[0]
        p0 = (len(residuals) * width, np.mean(residuals), np.std(residuals))
        popt, pcov = curve_fit(gauss, x, y, p0=p0)

        return abs(popt[2])

    def find_resolutions(self):
        """Fit the radial and azimuthal resolution

        :return: tuple of radial and azimuthal resolution, -999 for a
            resolution which could not be fitted.

        """
        resolutions = []
        for residuals in self.residuals():
            try:
                resolutions.append(self.fit_resolution(residuals))
            except RuntimeError:
                warnings.warn("Fit failed")
                resolutions.append(-999)
        return tuple(resolutions)
