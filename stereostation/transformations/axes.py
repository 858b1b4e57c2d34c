""" Perform various axes related transformations

- Transformation between Cartesian and polar coordinate systems.
- Rotations in the x,y-plane.

Cartesian coordinates: x, y axes.

Polar coordinates:
- r: length of vector in x,y-plane.
- phi: angle of vector to the x-axis in x,y-plane, rotating counterclockwise.

"""
from numpy import sqrt, arctan2, sin, cos


def cartesian_to_polar(x, y):
    """Converts Cartesian coordinates into polar coordinates

    :param x,y: Cartesian coordinates
    :return: tuple of polar coordinates (r, phi), with phi in radians.

    """
    r = sqrt(x * x + y * y)
    phi = arctan2(y, x)
    return r, phi


def polar_to_cartesian(r, phi):
    """Convert polar coordinates into Cartesian coordinates

    :param r,phi: polar coordinates, with phi in radians.
    :return: tuple of Cartesian coordinates (x, y)

    """
    x = r * cos(phi)
    y = r * sin(phi)
    return x, y


def displaced_polar_to_cartesian(r, phi, rphi):
    """Convert polar coordinates with a tangential offset to Cartesian

    The point is placed at radius r along the direction phi and then moved
    by rphi perpendicular to that direction (counterclockwise).

    :param r,phi: polar coordinates, with phi in radians.
    :param rphi: tangential displacement, in the units of r.
    :return: tuple of Cartesian coordinates (x, y)

    """
    cosp = cos(phi)
    sinp = sin(phi)
    x = r * cosp - rphi * sinp
    y = r * sinp + rphi * cosp
    return x, y


def rotate_xy(x, y, angle):
    """Rotate Cartesian coordinates in the x,y-plane

    The point is rotated counterclockwise around the origin.  Rotating
    by -angle expresses a point in a frame whose x-axis lies at angle.

    :param x,y: Cartesian coordinates.
    :param angle: amount of rotation in radians.
    :return: tuple of rotated Cartesian coordinates (x, y).

    """
    sina = sin(angle)
    cosa = cos(angle)
    return x * cosa - y * sina, x * sina + y * cosa
