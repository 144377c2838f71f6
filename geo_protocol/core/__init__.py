"""
Core geodesy modules.

Contains the spherical-earth geometry functions and the GeoPoint
value type built on them.
"""
from geo_protocol.core.geometry import (
    haversine_distance,
    forward_azimuth,
    azimuth_to_compass,
    destination_point,
    cap_distance,
    EARTH_RADIUS_M,
)
from geo_protocol.core.location import GeoPoint

__all__ = [
    'haversine_distance',
    'forward_azimuth',
    'azimuth_to_compass',
    'destination_point',
    'cap_distance',
    'EARTH_RADIUS_M',
    'GeoPoint',
]
