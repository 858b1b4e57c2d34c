"""Configuration of a stereo detection station

The :class:`StationConfig` holds the layout of a
:class:`~stereostation.station.DetectionStation`: the number of angular
sectors, the radial segment boundaries and, per radial segment, the
stereo angles, pitches and resolutions.

The station itself does not check its configuration, this is done by
:meth:`StationConfig.validate`.

Example usage::

    >>> from stereostation.config import StationConfig

    >>> config = StationConfig.from_json('my_station.json')
    >>> config.n_rad_segments
    2

"""
from json import load
from math import sin
from os import path

from .sectors import MIN_STEREO_SINE

DEFAULT_CONFIG = path.join(path.dirname(__file__), 'data',
                           'default_station.json')

SEGMENT_KEYS = ('phi_uv', 'pitch_uv', 'phi_w', 'pitch_w', 'sigma_r',
                'sigma_rphi')


class StationConfig(object):

    """Layout of a stereo detection station

    :param n_sectors: number of angular sectors.
    :param radii: ascending radial segment boundaries.
    :param phi_uv: stereo angle of the U plane per radial segment, in
        radians.  The V plane is at -phi_uv.
    :param pitch_uv: pitch of the U and V planes per radial segment.
    :param phi_w: angle of the W plane per radial segment, in radians.
    :param pitch_w: pitch of the W plane per radial segment.
    :param sigma_r,sigma_rphi: radial and azimuthal resolution per radial
        segment.

    """

    def __init__(self, n_sectors, radii, phi_uv, pitch_uv, phi_w, pitch_w,
                 sigma_r, sigma_rphi):
        self.n_sectors = n_sectors
        self.radii = list(radii)
        self.phi_uv = list(phi_uv)
        self.pitch_uv = list(pitch_uv)
        self.phi_w = list(phi_w)
        self.pitch_w = list(pitch_w)
        self.sigma_r = list(sigma_r)
        self.sigma_rphi = list(sigma_rphi)

    @classmethod
    def from_dict(cls, settings):
        """Create a validated configuration from a dictionary

        :raises KeyError: for unknown keys.

        """
        unknown = set(settings) - {'n_sectors', 'radii'} - set(SEGMENT_KEYS)
        if unknown:
            raise KeyError('Unknown station settings: %s' %
                           ', '.join(sorted(unknown)))
        config = cls(**settings)
        config.validate()
        return config

    @classmethod
    def from_json(cls, filename):
        with open(filename) as json_file:
            settings = load(json_file)
        return cls.from_dict(settings)

    @classmethod
    def default(cls):
        """Configuration shipped with the package"""

        return cls.from_json(DEFAULT_CONFIG)

    @property
    def n_rad_segments(self):
        return len(self.radii) - 1

    def as_dict(self):
        settings = {'n_sectors': self.n_sectors, 'radii': self.radii}
        for key in SEGMENT_KEYS:
            settings[key] = getattr(self, key)
        return settings

    def validate(self):
        """Check the preconditions of the station geometry

        :raises ValueError: if the configuration can not be used.

        """
        if self.n_sectors < 1:
            raise ValueError('At least one sector is required.')
        if len(self.radii) < 2:
            raise ValueError('At least two radii are required.')
        if self.radii[0] < 0:
            raise ValueError('Radii can not be negative.')
        if any(r1 >= r2 for r1, r2 in zip(self.radii[:-1], self.radii[1:])):
            raise ValueError('Radii must be strictly ascending.')

        for key in SEGMENT_KEYS:
            if len(getattr(self, key)) != self.n_rad_segments:
                raise ValueError('Expected %d values for %s, got %d.' %
                                 (self.n_rad_segments, key,
                                  len(getattr(self, key))))
        for key in ('pitch_uv', 'pitch_w', 'sigma_r', 'sigma_rphi'):
            if any(value <= 0 for value in getattr(self, key)):
                raise ValueError('All values of %s must be positive.' % key)

        for segment, (phi_uv, phi_w) in enumerate(zip(self.phi_uv,
                                                      self.phi_w)):
            for planes, angle in (('U and V', 2 * phi_uv),
                                  ('U and W', phi_w - phi_uv),
                                  ('V and W', phi_w + phi_uv)):
                if abs(sin(angle)) < MIN_STEREO_SINE:
                    raise ValueError('The %s planes of radial segment %d are '
                                     '(nearly) parallel.' % (planes, segment))
