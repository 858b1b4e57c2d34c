"""Define the sectors of a stereo station

The :class:`SectorFrame` describes the angular/radial wedge covered by a
sector and the rotation between the lab frame and the sector frame.  In
the sector frame the local x-axis lies along the bisector of the wedge.

The :class:`StereoSector` combines a frame with three measurement planes:
the U and V strip planes at opposite stereo angles and the W wire plane.

"""
from math import cos, sin, tan

from .planes import MeasurementPlane
from .transformations import axes

#: Smallest allowed sine of the angle between two measurement planes.
#: Crossings of more parallel planes are numerically unstable.
MIN_STEREO_SINE = 1e-3


class SectorFrame(object):

    """An angular/radial wedge

    :param phi0: azimuth of the center of the wedge, in radians.
    :param half_width: half of the angular width of the wedge, in radians.
    :param r_min,r_max: inner and outer radius of the wedge.

    """

    def __init__(self, phi0, half_width, r_min, r_max):
        self.phi0 = phi0
        self.half_width = half_width
        self.r_min = r_min
        self.r_max = r_max
        self.tan_half_width = tan(half_width)

    def to_local(self, x, y):
        """Rotate lab coordinates into the sector frame"""

        return axes.rotate_xy(x, y, -self.phi0)

    def to_lab(self, xl, yl):
        """Rotate sector-local coordinates back into the lab frame"""

        return axes.rotate_xy(xl, yl, self.phi0)

    def is_inside(self, xl, yl):
        """Check if a sector-local point lies within the wedge

        The sides of the wedge are straight lines, the inner and outer
        boundaries are taken perpendicular to the bisector.

        """
        return (self.r_min <= xl <= self.r_max and
                abs(yl) <= xl * self.tan_half_width)

    def corners(self):
        """Get the sector-local coordinates of the wedge corners

        :return: list of (x, y) tuples.

        """
        return [(r, sign * r * self.tan_half_width)
                for r in (self.r_min, self.r_max) for sign in (1, -1)]


class StereoSector(object):

    """A sector read out by three stereo measurement planes

    :param phi0,half_width,r_min,r_max: geometry of the wedge, see
        :class:`SectorFrame`.
    :param phi_uv: stereo angle of the U plane, the V plane is at
        -phi_uv.
    :param pitch_uv: pitch of the U and V strip planes.
    :param phi_w,pitch_w: angle and pitch of the W wire plane.
    :param sigma_r,sigma_rphi: radial and azimuthal resolution.

    """

    def __init__(self, phi0, half_width, r_min, r_max, phi_uv, pitch_uv,
                 phi_w, pitch_w, sigma_r, sigma_rphi):
        self.frame = SectorFrame(phi0, half_width, r_min, r_max)
        self.u = MeasurementPlane(phi_uv, pitch_uv, self.frame)
        self.v = MeasurementPlane(-phi_uv, pitch_uv, self.frame)
        self.w = MeasurementPlane(phi_w, pitch_w, self.frame)
        self.sigma_r = sigma_r
        self.sigma_rphi = sigma_rphi

        # cos and sin of the angle from the first to the second plane
        self.cos_uv, self.sin_uv = cos(-2 * phi_uv), sin(-2 * phi_uv)
        self.cos_uw, self.sin_uw = cos(phi_w - phi_uv), sin(phi_w - phi_uv)
        self.cos_vw, self.sin_vw = cos(phi_w + phi_uv), sin(phi_w + phi_uv)
        self._trig = {(self.u, self.v): (self.cos_uv, self.sin_uv),
                      (self.u, self.w): (self.cos_uw, self.sin_uw),
                      (self.v, self.w): (self.cos_vw, self.sin_vw)}

    @property
    def planes(self):
        return self.u, self.v, self.w

    def project_uvw(self, x, y):
        """Get the U, V and W channels measured for a lab point

        :param x,y: lab coordinates of the point.
        :return: tuple of channels (U, V, W), or None if the point is not
            inside the sector.

        """
        xl, yl = self.frame.to_local(x, y)
        if not self.frame.is_inside(xl, yl):
            return None
        return tuple(plane.channel(xl, yl) for plane in self.planes)

    def intersect(self, plane_a, channel_a, plane_b, channel_b):
        """Find the crossing of two channel lines

        The plane pair must be one of (U, V), (U, W) or (V, W).

        :param plane_a,channel_a: first plane and its channel.
        :param plane_b,channel_b: second plane and its channel.
        :return: sector-local coordinates (x, y) of the crossing, or None
            if the planes are too close to parallel.

        """
        cos_ab, sin_ab = self._trig[plane_a, plane_b]
        if abs(sin_ab) < MIN_STEREO_SINE:
            return None
        h_a = plane_a.coordinate(channel_a)
        h_b = plane_b.coordinate(channel_b)
        t = (h_b - h_a * cos_ab) / sin_ab
        return plane_a.point_on_line(channel_a, t)

    def clear(self):
        for plane in self.planes:
            plane.clear()

    def __repr__(self):
        frame = self.frame
        return ('<%s, phi0: %.3f, %.1f < R < %.1f>' %
                (self.__class__.__name__, frame.phi0, frame.r_min,
                 frame.r_max))
