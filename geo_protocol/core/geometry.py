"""
Spherical-earth geometry functions.

Provides great-circle distance, forward azimuth, destination point and
spherical-cap sampling. All angles are in radians and all distances in
meters on a sphere of mean Earth radius.

References:
    https://www.movable-type.co.uk/scripts/latlong.html
"""
import math
from typing import Tuple


# Earth's radius in meters (mean radius)
EARTH_RADIUS_M = 6371000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great-circle distance between two points using Haversine formula.

    Args:
        lat1: Latitude of first point (radians)
        lon1: Longitude of first point (radians)
        lat2: Latitude of second point (radians)
        lon2: Longitude of second point (radians)

    Returns:
        Distance in meters

    Example:
        >>> # A quarter of the equator
        >>> distance = haversine_distance(0.0, 0.0, 0.0, math.pi / 2)
        >>> print(f"{distance / 1000:.1f} km")
        10007.5 km

    References:
        https://en.wikipedia.org/wiki/Haversine_formula
    """
    dlat = lat1 - lat2
    dlon = lon1 - lon2

    a = math.sin(dlat / 2) * math.sin(dlat / 2) + \
        math.sin(dlon / 2) * math.sin(dlon / 2) * math.cos(lat1) * math.cos(lat2)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def forward_azimuth(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the initial bearing (forward azimuth) from point 1 to point 2.

    The longitude difference is taken as ``lon1 - lon2``, so the angle grows
    counter-clockwise from north: a point due east yields ``-pi/2`` and a
    point due west ``+pi/2``. Use :func:`azimuth_to_compass` to obtain a
    clockwise compass bearing.

    Args:
        lat1: Latitude of starting point (radians)
        lon1: Longitude of starting point (radians)
        lat2: Latitude of destination point (radians)
        lon2: Longitude of destination point (radians)

    Returns:
        Angle in radians in the range (-pi, pi]
    """
    dlon = lon1 - lon2

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - \
        math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return math.atan2(y, x)


def azimuth_to_compass(azimuth: float) -> float:
    """
    Convert a :func:`forward_azimuth` angle to a compass bearing.

    Args:
        azimuth: Counter-clockwise angle from north (radians)

    Returns:
        Bearing in degrees (0-360), clockwise from north, where:
        - 0° = North
        - 90° = East
        - 180° = South
        - 270° = West
    """
    bearing_deg = -azimuth / math.pi * 180

    # Normalize to 0-360
    return (bearing_deg + 360) % 360


def destination_point(lat: float, lon: float,
                      distance_m: float, bearing: float) -> Tuple[float, float]:
    """
    Calculate the point reached travelling along a great circle.

    Args:
        lat: Latitude of starting point (radians)
        lon: Longitude of starting point (radians)
        distance_m: Distance travelled (meters)
        bearing: Initial bearing, clockwise from north (radians)

    Returns:
        Tuple of (latitude, longitude) in radians. The longitude is not
        wrapped to [-pi, pi].

    References:
        https://www.movable-type.co.uk/scripts/latlong.html#destPoint
    """
    # Angular distance
    delta = distance_m / EARTH_RADIUS_M

    new_lat = math.asin(math.sin(lat) * math.cos(delta) +
                        math.cos(lat) * math.sin(delta) * math.cos(bearing))
    new_lon = lon + math.atan2(
        math.sin(bearing) * math.sin(delta) * math.cos(lat),
        math.cos(delta) - math.sin(lat) * math.sin(new_lat))

    return new_lat, new_lon


def cap_distance(angular_radius: float, u: float) -> float:
    """
    Map a uniform draw to a distance from the centre of a spherical cap.

    Inverse CDF of the area-uniform radial distribution on a cap: the area
    within angular distance ``r`` is proportional to ``1 - cos(r)``.

    Args:
        angular_radius: Cap radius as an angle at the sphere's centre (radians)
        u: Uniform draw in [0, 1)

    Returns:
        Distance from the cap centre in meters
    """
    return math.acos(1 - (1 - math.cos(angular_radius)) * u) * EARTH_RADIUS_M
