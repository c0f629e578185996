"Some geo coordinates related tools"
from math import radians, sin, cos, acos
from typing import Iterable
from itertools import tee
from geographiclib.geodesic import Geodesic
from openlr import Coordinates
from shapely.geometry import LineString

#: Earth radius in statute miles. Every path weight and reported total uses this unit.
EARTH_RADIUS_MILES = 3963.1

#: Conversion factor for geodesic results, which geographiclib reports in meters
METERS_PER_MILE = 1609.344


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Returns the great-circle distance in miles between (lat1, lon1) and (lat2, lon2)

    Latitudes are positive north of the equator, longitudes positive east of Greenwich.
    Uses the spherical law of cosines. Coordinates are not validated."""
    if lat1 == lat2 and lon1 == lon2:
        return 0.0
    lat1_rad, lon1_rad = radians(lat1), radians(lon1)
    lat2_rad, lon2_rad = radians(lat2), radians(lon2)
    cosine = (
        cos(lat1_rad) * cos(lon1_rad) * cos(lat2_rad) * cos(lon2_rad)
        + cos(lat1_rad) * sin(lon1_rad) * cos(lat2_rad) * sin(lon2_rad)
        + sin(lat1_rad) * sin(lat2_rad)
    )
    # Rounding may push nearby points slightly outside of acos' domain
    cosine = max(-1.0, min(1.0, cosine))
    return EARTH_RADIUS_MILES * acos(cosine)


def coordinate_distance(point_a: Coordinates, point_b: Coordinates) -> float:
    "Returns the great-circle distance of two coordinates, in miles"
    return distance(point_a.lat, point_a.lon, point_b.lat, point_b.lon)


def geodesic_distance(point_a: Coordinates, point_b: Coordinates) -> float:
    "Returns the distance of two WGS84 coordinates on the ellipsoid, in miles"
    geod = Geodesic.WGS84
    line = geod.Inverse(point_a.lat, point_a.lon, point_b.lat, point_b.lon, Geodesic.DISTANCE)
    # According to https://geographiclib.sourceforge.io/1.50/python/, the distance between
    # point 1 and 2 is stored in the attribute `s12`.
    return line["s12"] / METERS_PER_MILE


def pairwise(iterable: Iterable):
    "s -> (s0,s1), (s1,s2), (s2, s3), ..."
    first, second = tee(iterable)
    next(second, None)
    return zip(first, second)


def line_string_length(line_string: LineString) -> float:
    """Returns the great-circle length of a line string in miles

    The line string stores (lon, lat) tuples, like shapely geometries built from
    `Coordinates`."""
    length = 0.0

    for (coord_a, coord_b) in pairwise(line_string.coords):
        length += distance(coord_a[1], coord_a[0], coord_b[1], coord_b[0])

    return length
