"""One dimensional measurement planes

A :class:`MeasurementPlane` is a set of parallel strips or wires at a
fixed orientation and pitch.  It measures the projection of a point on
its measurement axis, expressed as a continuous channel number.

"""
from collections import namedtuple
from math import cos, sin

#: A channel measurement recorded on a plane during an event.
Hit = namedtuple('Hit', ['channel', 'label'])


class MeasurementPlane(object):

    """A plane of strips or wires measuring one projection

    The measurement axis lies at ``angle`` to the local x-axis of the
    sector.  The channel offset is calibrated such that the lowest channel
    found on the corners of the sector is exactly zero.

    :param angle: orientation of the measurement axis, in radians.
    :param pitch: width of one channel, in length units.
    :param frame: the :class:`~stereostation.sectors.SectorFrame` which
        is covered by this plane.

    """

    def __init__(self, angle, pitch, frame):
        self.angle = angle
        self.pitch = pitch
        self.cosa = cos(angle)
        self.sina = sin(angle)
        self.offset = 0.
        self.hits = []

        self.offset = min(self.channel(x, y) for x, y in frame.corners())

    def channel(self, x, y):
        """Get the channel measured for a point

        :param x,y: sector-local coordinates of the point.
        :return: channel number (not rounded).

        """
        return (x * self.cosa + y * self.sina) / self.pitch - self.offset

    def coordinate(self, channel):
        """Position along the measurement axis of a channel"""

        return (channel + self.offset) * self.pitch

    def point_on_line(self, channel, t):
        """Get a point on the line of constant channel

        :param channel: channel number of the strip or wire.
        :param t: position along the line, perpendicular to the
            measurement axis.
        :return: tuple of sector-local coordinates (x, y).

        """
        h = self.coordinate(channel)
        return (h * self.cosa - t * self.sina,
                h * self.sina + t * self.cosa)

    def add_hit(self, channel, label):
        self.hits.append(Hit(channel, label))

    def pop_hit(self):
        return self.hits.pop()

    def clear(self):
        """Remove all hits recorded during the current event"""

        self.hits = []

    def __repr__(self):
        return ('<%s, angle: %.3f, pitch: %.3f, offset: %.2f, hits: %d>' %
                (self.__class__.__name__, self.angle, self.pitch,
                 self.offset, len(self.hits)))
