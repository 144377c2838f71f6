"""
Geographic point value type with spherical-earth geodesy and a msgpack
wire codec for exchanging points between processes.
"""
from geo_protocol.core import GeoPoint, EARTH_RADIUS_M
from geo_protocol.codec import LocationCodec, encode, decode
from geo_protocol.utils.exceptions import (
    GeoProtocolError,
    InvalidArgumentError,
    MalformedDataError,
)

__version__ = "0.1.0"

__all__ = [
    'GeoPoint',
    'EARTH_RADIUS_M',
    'LocationCodec',
    'encode',
    'decode',
    'GeoProtocolError',
    'InvalidArgumentError',
    'MalformedDataError',
]
