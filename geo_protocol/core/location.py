"""
GeoPoint value type.

A point on a spherical Earth stored as longitude/latitude in radians and
altitude in meters. The public surface speaks degrees; radians are an
internal representation and are what the wire codec serializes.

Coordinates are never wrapped: longitudes beyond ±180° and latitudes beyond
±90° are kept as given (or as produced by :meth:`GeoPoint.move_by`) and are
left to callers to normalize.
"""
import math
import struct

from geo_protocol.core.geometry import (
    EARTH_RADIUS_M,
    haversine_distance,
    forward_azimuth,
    azimuth_to_compass,
    destination_point,
    cap_distance,
)
from geo_protocol.utils.exceptions import InvalidArgumentError
from geo_protocol.utils.logging_config import get_logger

logger = get_logger(__name__)

_FIELD_BITS = struct.Struct('<ddd')


def _to_radians(degrees: float) -> float:
    return float(degrees) / 180 * math.pi


def _to_degrees(radians: float) -> float:
    return radians / math.pi * 180


class GeoPoint:
    """
    Geographic point with longitude, latitude and altitude.

    Equality and hashing compare the exact bit patterns of the internal
    radian/meter fields, so ``0.0`` and ``-0.0`` differ and two points built
    by different arithmetic may compare unequal even when numerically close.
    NaN fields are not canonicalized: two NaNs are equal only when their
    payload bits match, unlike Java's ``doubleToLongBits`` which folds every
    NaN into one value.

    Args:
        longitude: Longitude in degrees
        latitude: Latitude in degrees
        altitude: Altitude in meters

    Example:
        >>> origin = GeoPoint(longitude=0.0, latitude=0.0)
        >>> east = GeoPoint(longitude=90.0, latitude=0.0)
        >>> print(f"{origin.distance_to(east) / 1000:.1f} km")
        10007.5 km
    """

    __slots__ = ('_longitude', '_latitude', '_altitude')

    def __init__(self, longitude: float = 0.0, latitude: float = 0.0, altitude: float = 0.0):
        self.longitude = longitude
        self.latitude = latitude
        self.altitude = altitude

    @classmethod
    def _from_radians(cls, longitude: float, latitude: float, altitude: float) -> "GeoPoint":
        # Internal fields are restored as-is, without a degree round trip
        point = cls.__new__(cls)
        point._longitude = float(longitude)
        point._latitude = float(latitude)
        point._altitude = float(altitude)
        return point

    @property
    def longitude(self) -> float:
        """Longitude in degrees."""
        return _to_degrees(self._longitude)

    @longitude.setter
    def longitude(self, value: float):
        self._longitude = _to_radians(value)

    @property
    def latitude(self) -> float:
        """Latitude in degrees."""
        return _to_degrees(self._latitude)

    @latitude.setter
    def latitude(self, value: float):
        self._latitude = _to_radians(value)

    @property
    def altitude(self) -> float:
        """Altitude in meters."""
        return self._altitude

    @altitude.setter
    def altitude(self, value: float):
        self._altitude = float(value)

    def distance_to(self, other: "GeoPoint") -> float:
        """
        Great-circle distance to another point, in meters.

        Altitude is ignored. NaN coordinates propagate to the result.
        """
        return haversine_distance(self._latitude, self._longitude,
                                  other._latitude, other._longitude)

    def altitude_difference(self, other: "GeoPoint") -> float:
        """Altitude of this point minus the altitude of ``other``, in meters."""
        return self._altitude - other._altitude

    def forward_azimuth_angle(self, other: "GeoPoint") -> float:
        """
        Initial bearing towards ``other`` as returned by ``atan2``.

        Returns:
            Angle in radians in (-pi, pi], counter-clockwise from north
            (a point due east gives -pi/2). Not normalized; see
            :meth:`compass_bearing_to` for the clockwise convention that
            :meth:`move_by` expects.
        """
        return forward_azimuth(self._latitude, self._longitude,
                               other._latitude, other._longitude)

    def compass_bearing_to(self, other: "GeoPoint") -> float:
        """Initial bearing towards ``other`` in degrees (0-360), clockwise from north."""
        return azimuth_to_compass(self.forward_azimuth_angle(other))

    def move_by(self, distance_in_meters: float, bearing_in_degrees: float) -> "GeoPoint":
        """
        Point at the given great-circle distance and initial bearing.

        Args:
            distance_in_meters: Distance to travel
            bearing_in_degrees: Initial bearing, clockwise from north

        Returns:
            New GeoPoint with this point's altitude. The longitude is not
            wrapped to [-180, 180].
        """
        bearing = _to_radians(bearing_in_degrees)
        new_lat, new_lon = destination_point(self._latitude, self._longitude,
                                             distance_in_meters, bearing)
        return GeoPoint._from_radians(new_lon, new_lat, self._altitude)

    def random_location_in_circle(self, rng, radius_in_meters: float,
                                  legacy_bearing: bool = False) -> "GeoPoint":
        """
        Sample a point uniformly by area within a circle around this point.

        Draws exactly twice from ``rng``: first the radial distance, then
        the bearing.

        Args:
            rng: Random source with a ``random()`` method returning a float
                in [0, 1), e.g. ``random.Random`` or ``numpy.random.Generator``
            radius_in_meters: Circle radius along the Earth's surface
            legacy_bearing: Scale the bearing draw to 2π and pass it on as
                degrees. This reproduces streams recorded by older peers,
                whose samples only cover bearings between 0° and ~6.28°.

        Returns:
            Sampled GeoPoint with this point's altitude

        Raises:
            InvalidArgumentError: If the radius is at least half the
                Earth's circumference
        """
        angular_radius = radius_in_meters / EARTH_RADIUS_M

        if angular_radius >= math.pi:
            logger.warning("invalid_sampling_radius", radius_m=radius_in_meters)
            raise InvalidArgumentError(
                "Radius has to be smaller than half the circumference of the Earth",
                argument="radius_in_meters",
                value=radius_in_meters,
            )

        distance_in_meters = cap_distance(angular_radius, rng.random())
        if legacy_bearing:
            bearing_in_degrees = rng.random() * 2 * math.pi
        else:
            bearing_in_degrees = rng.random() * 360
        return self.move_by(distance_in_meters, bearing_in_degrees)

    def _bits(self) -> bytes:
        return _FIELD_BITS.pack(self._longitude, self._latitude, self._altitude)

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._bits() == other._bits()

    def __hash__(self):
        return hash(self._bits())

    def __repr__(self):
        return (f"GeoPoint(longitude_rad={self._longitude!r}, "
                f"latitude_rad={self._latitude!r}, altitude_m={self._altitude!r})")
