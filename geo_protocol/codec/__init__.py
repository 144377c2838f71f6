"""
Wire encoding for locations.
"""
from geo_protocol.codec.location_codec import (
    LocationCodec,
    encode,
    decode,
)

__all__ = ['LocationCodec', 'encode', 'decode']
