"""Simulate and reconstruct a stereo strip/wire detection station

The station is divided into angular sectors, each of which is divided
into radial segments.  Every segment is a
:class:`~stereostation.sectors.StereoSector` read out by three planes:
two strip planes (U and V) at opposite stereo angles and a wire plane
(W).

During an event truth hits are digitized into channels on the three
planes.  Reconstruction then matches the channels of the planes and
reports the found space points, including combinatorial ghosts, to the
truth sink.

Example usage::

    >>> from stereostation import DetectionStation, StationConfig, MCTruth
    >>> from stereostation.samplers import GaussianSampler

    >>> truth = MCTruth()
    >>> station = DetectionStation.from_config(StationConfig.default(),
    ...                                        truth, GaussianSampler(1))
    >>> station.begin_event()
    >>> station.digitize(10., 5., 0., 0, is_background=True)
    True
    >>> station.reconstruct()
    >>> [cluster.label for cluster in truth.background]
    [0]

"""
from collections import namedtuple
from math import pi
import logging

from .sectors import StereoSector
from .transformations import axes
from .truth import SIGNAL_LABEL, GHOST_LABEL_OFFSET, check_label
from .utils import norm_angle

logger = logging.getLogger('stereostation.station')

#: Largest accepted chi2 of the distance between the U-W and V-W
#: crossings of a coincidence.
CHI2_CUT = 9.

#: Channels of the signal hit and the sector in which they were recorded.
SignalRecord = namedtuple('SignalRecord', ['u', 'v', 'w', 'sector_id'])

#: Space point found by matching channels of the three planes.
Coincidence = namedtuple('Coincidence',
                         ['sector_id', 'x', 'y', 'chi2', 'label'])


class DetectionStation(object):

    """A stereo detection station

    :param truth: truth sink, see :class:`~stereostation.truth.BaseTruthSink`.
    :param sampler: source of standard normal samples, see
        :mod:`~stereostation.samplers`.
    :param z: z position of the station, used for reconstructed clusters.

    """

    def __init__(self, truth, sampler, z=0.):
        self.truth = truth
        self.sampler = sampler
        self.z = z

        self.sectors = []
        self.radii = []
        self.n_sectors = 0
        self.n_rad_segments = 0
        self.d_phi = 0.
        self.signal = None

    @classmethod
    def from_config(cls, config, truth, sampler, z=0.):
        """Create a station from a :class:`~stereostation.config.StationConfig`

        :raises ValueError: if the configuration is not valid.

        """
        config.validate()
        station = cls(truth, sampler, z)
        station.build(config.n_sectors, config.radii, config.phi_uv,
                      config.pitch_uv, config.phi_w, config.pitch_w,
                      config.sigma_r, config.sigma_rphi)
        return station

    def build(self, n_sectors, radii, phi_uv, pitch_uv, phi_w, pitch_w,
              sigma_r, sigma_rphi):
        """Create the sectors of the station

        The arguments are not validated, see
        :meth:`~stereostation.config.StationConfig.validate`.

        :param n_sectors: number of angular sectors.
        :param radii: ascending radial segment boundaries.
        :param phi_uv,pitch_uv,phi_w,pitch_w,sigma_r,sigma_rphi: plane
            layout and resolutions, one value per radial segment.

        """
        self.d_phi = 2 * pi / n_sectors
        self.n_sectors = n_sectors
        self.radii = list(radii)
        self.n_rad_segments = len(radii) - 1
        self.sectors = []
        for ip in range(n_sectors):
            phi0 = (ip + 0.5) * self.d_phi
            for ir in range(self.n_rad_segments):
                self.sectors.append(
                    StereoSector(phi0, 0.5 * self.d_phi, radii[ir],
                                 radii[ir + 1], phi_uv[ir], pitch_uv[ir],
                                 phi_w[ir], pitch_w[ir], sigma_r[ir],
                                 sigma_rphi[ir]))

    def sector(self, sector_id):
        return self.sectors[sector_id]

    def locate_sector(self, x, y):
        """Find the sector containing a lab point

        :param x,y: lab coordinates of the point.
        :return: sector id, or None if the point is outside the station.

        """
        phi = norm_angle(axes.cartesian_to_polar(x, y)[1])
        sector_id = min(int(phi / self.d_phi), self.n_sectors - 1)
        sector_id *= self.n_rad_segments

        # The radial segments of an angular sector share their frame
        xl, _ = self.sectors[sector_id].frame.to_local(x, y)
        if xl < self.sectors[sector_id].frame.r_min:
            return None
        for _ in range(self.n_rad_segments):
            if xl < self.sectors[sector_id].frame.r_max:
                return sector_id
            sector_id += 1
        return None

    def begin_event(self):
        """Start a new event, removing all recorded hits"""

        self.clear_all()
        self.signal = None

    def end_event(self):
        self.clear_all()
        self.signal = None

    def clear_all(self):
        for sector in self.sectors:
            sector.clear()

    def digitize(self, x, y, z, label, is_background=True):
        """Record a truth hit as channels on the planes of its sector

        The hit position is smeared with the radial and azimuthal
        resolution of the sector.  The smeared hit may end up in a
        neighbouring sector.

        :param x,y,z: lab position of the truth hit.
        :param label: truth label of the hit.
        :param is_background: if False the hit is the signal hit of the
            event.
        :return: True if the hit was recorded.
        :raises ValueError: if a background hit carries the label reserved
            for the signal hit.

        """
        if is_background and label == SIGNAL_LABEL:
            raise ValueError('Label %d is reserved for the signal hit.' %
                             SIGNAL_LABEL)
        check_label(label)
        if not is_background:
            self.truth.kill_signal(True)
            self.signal = None

        sector_id = self.locate_sector(x, y)
        if sector_id is None:
            logger.debug('Hit %d at (%.3f, %.3f) is outside the station.',
                         label, x, y)
            return False
        sector = self.sectors[sector_id]

        rx, ry = self.sampler.sample_normal_pair()
        r, phi = axes.cartesian_to_polar(x, y)
        r += ry * sector.sigma_r
        x, y = axes.displaced_polar_to_cartesian(r, phi,
                                                 rx * sector.sigma_rphi)

        smeared_id = self.locate_sector(x, y)
        if smeared_id is not None:
            sector_id = smeared_id
            sector = self.sectors[sector_id]

        channels = sector.project_uvw(x, y)
        if channels is None:
            logger.debug('Smeared hit %d at (%.3f, %.3f) is outside sector '
                         '%d.', label, x, y, sector_id)
            return False
        u, v, w = channels

        if not is_background:
            self.signal = SignalRecord(u, v, w, sector_id)
            self.truth.kill_signal(False)
            self.truth.set_signal(x, y, z, label)
        else:
            sector.u.add_hit(u, label)
            sector.v.add_hit(v, label)
            sector.w.add_hit(w, label)
            self.truth.add_background_cluster(x, y, z, label)
        return True

    def find_coincidences(self, sector_id):
        """Find the space points in a sector

        Every combination of a U and a W channel gives a crossing, as
        does every combination of a V and the same W channel.  If both
        crossings are inside the sector and close enough to each other
        their midpoint is a coincidence.

        Coincidences of channels which do not share their label are
        ghosts and get the label of the U channel plus
        ``GHOST_LABEL_OFFSET``.

        :param sector_id: id of the sector.
        :return: list of :class:`Coincidence` tuples, in lab coordinates.

        """
        sector = self.sectors[sector_id]
        frame = sector.frame
        coincidences = []

        for u_hit in sector.u.hits:
            for w_hit in sector.w.hits:
                uw = sector.intersect(sector.u, u_hit.channel,
                                      sector.w, w_hit.channel)
                if uw is None or not frame.is_inside(*uw):
                    continue

                for v_hit in sector.v.hits:
                    vw = sector.intersect(sector.v, v_hit.channel,
                                          sector.w, w_hit.channel)
                    if vw is None or not frame.is_inside(*vw):
                        continue

                    dx = uw[0] - vw[0]
                    dy = uw[1] - vw[1]
                    chi2 = (dx ** 2 / sector.sigma_r ** 2 +
                            dy ** 2 / sector.sigma_rphi ** 2) / 2
                    if chi2 > CHI2_CUT:
                        continue

                    x, y = frame.to_lab(0.5 * (uw[0] + vw[0]),
                                        0.5 * (uw[1] + vw[1]))
                    if u_hit.label == v_hit.label == w_hit.label:
                        label = u_hit.label
                    else:
                        label = GHOST_LABEL_OFFSET + u_hit.label
                    coincidences.append(
                        Coincidence(sector_id, x, y, chi2, label))

        return coincidences

    def reconstruct(self):
        """Reconstruct the space points of the event

        The signal hit is temporarily added to the channels of its
        sector, such that it is matched together with the background
        hits.  Found coincidences are reported to the truth sink.
        Afterwards the event is ended and all channels are removed.

        """
        self.truth.reset_background_clusters()

        signal_sector = None
        if self.signal is not None:
            signal_sector = self.sectors[self.signal.sector_id]
            signal_sector.u.add_hit(self.signal.u, SIGNAL_LABEL)
            signal_sector.v.add_hit(self.signal.v, SIGNAL_LABEL)
            signal_sector.w.add_hit(self.signal.w, SIGNAL_LABEL)

        n_coincidences = 0
        for sector_id in range(len(self.sectors)):
            for coincidence in self.find_coincidences(sector_id):
                logger.debug('Coincidence in sector %d: %f %f, chi2=%f, '
                             'label: %d', *coincidence)
                if (coincidence.label == SIGNAL_LABEL and
                        self.signal is not None):
                    self.truth.set_signal_position(coincidence.x,
                                                   coincidence.y)
                else:
                    self.truth.add_background_cluster(
                        coincidence.x, coincidence.y, self.z,
                        coincidence.label)
                n_coincidences += 1

        if signal_sector is not None:
            for plane in signal_sector.planes:
                plane.pop_hit()
        self.truth.sort_background_clusters()
        logger.info('Reconstructed %d coincidences.', n_coincidences)

        self.end_event()

    def describe(self):
        """Describe the layout of the station

        :return: string with one block per radial segment.

        """
        lines = []
        for ir in range(self.n_rad_segments):
            sector = self.sectors[ir]
            lines.append('** %d 3x1D stations for %.1f<R<%.1f, coverage in '
                         'phi: %.2f' % (self.n_sectors, self.radii[ir],
                                        self.radii[ir + 1], self.d_phi))
            lines.append('** UV strip planes with angle: %.2f, pitch: %.3f, '
                         'W plane with angle: %.2f, pitch: %.3f, sigmaR: '
                         '%.3f, sigmaRPhi: %.3f' %
                         (sector.u.angle, sector.u.pitch, sector.w.angle,
                          sector.w.pitch, sector.sigma_r, sector.sigma_rphi))
        return '\n'.join(lines)

    def __repr__(self):
        return ('<%s, %d sectors x %d radial segments, z: %.1f>' %
                (self.__class__.__name__, self.n_sectors,
                 self.n_rad_segments, self.z))
