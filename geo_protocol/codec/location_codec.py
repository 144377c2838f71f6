"""
msgpack wire codec for GeoPoint.

A location is three index-tagged float64 fields:

    0: longitude (radians)
    1: latitude (radians)
    2: altitude (meters)

The default layout is a msgpack map keyed by field index. The positional
array layout ``[longitude, latitude, altitude]`` is also produced on request
and always accepted when decoding. Values are encoded as msgpack float64
(big-endian IEEE-754), so a round trip restores every field bit for bit.
Indices above 2 are skipped when decoding.

Peers that map a location onto an annotated msgpack message class read and
write only the positional array layout; configure `CodecParams(layout="array")` when talking to them.
"""
from typing import Dict, Optional

import msgpack

from geo_protocol.core.location import GeoPoint
from geo_protocol.utils.config import CodecParams, GeoProtocolConfig
from geo_protocol.utils.error_handling import translate_unpack_errors
from geo_protocol.utils.exceptions import MalformedDataError

LONGITUDE_INDEX = 0
LATITUDE_INDEX = 1
ALTITUDE_INDEX = 2
FIELD_COUNT = 3

# msgpack float 64 marker, followed by 8 big-endian payload bytes
_FLOAT64_MARKER = 0xcb


def _is_map_header(first_byte: int) -> bool:
    return 0x80 <= first_byte <= 0x8f or first_byte in (0xde, 0xdf)


def _is_array_header(first_byte: int) -> bool:
    return 0x90 <= first_byte <= 0x9f or first_byte in (0xdc, 0xdd)


def _is_unsigned_int_header(marker: int) -> bool:
    # positive fixint, uint 8/16/32/64
    return marker <= 0x7f or 0xcc <= marker <= 0xcf


def _is_signed_int_header(marker: int) -> bool:
    # negative fixint, int 8/16/32/64
    return marker >= 0xe0 or 0xd0 <= marker <= 0xd3


def _peek(unpacker: msgpack.Unpacker, data: bytes) -> int:
    position = unpacker.tell()
    if position >= len(data):
        raise MalformedDataError("Location payload is truncated")
    return data[position]



class LocationCodec:
    """
    Encoder/decoder for GeoPoint payloads.

    Args:
        params: Codec parameters (layout, trailing byte policy)

    Example:
        >>> codec = LocationCodec()
        >>> payload = codec.encode(GeoPoint(longitude=-6.2603, latitude=53.3498))
        >>> codec.decode(payload) == GeoPoint(longitude=-6.2603, latitude=53.3498)
        True
    """

    def __init__(self, params: Optional[CodecParams] = None):
        self.params = params or CodecParams()

    @classmethod
    def from_config(cls, config: GeoProtocolConfig) -> "LocationCodec":
        return cls(config.codec)

    def encode(self, point: GeoPoint) -> bytes:
        """Encode a point to bytes in the configured layout."""
        fields = (point._longitude, point._latitude, point._altitude)
        if self.params.layout == "array":
            payload = list(fields)
        else:
            payload = dict(enumerate(fields))
        return msgpack.packb(payload, use_single_float=False)

    @translate_unpack_errors
    def decode(self, data: bytes) -> GeoPoint:
        """
        Decode a point from bytes in either layout.

        Raises:
            MalformedDataError: If the payload does not hold the three
                float64 fields, or holds anything else that is invalid
        """
        data = bytes(data)
        if not data:
            raise MalformedDataError("Location payload is empty")

        unpacker = msgpack.Unpacker(
            raw=False, strict_map_key=False, max_buffer_size=len(data)
        )
        unpacker.feed(data)

        first_byte = data[0]
        if _is_map_header(first_byte):
            fields = self._read_map(unpacker, data)
        elif _is_array_header(first_byte):
            fields = self._read_array(unpacker, data)
        else:
            raise MalformedDataError(
                "Location payload must be a msgpack map or array",
                details={'first_byte': first_byte},
            )

        missing = [i for i in range(FIELD_COUNT) if i not in fields]
        if missing:
            raise MalformedDataError(
                f"Location payload is missing fields {missing}",
                field_index=missing[0],
                details={'present': sorted(fields)},
            )

        if not self.params.allow_trailing_bytes and unpacker.tell() != len(data):
            raise MalformedDataError(
                "Unexpected bytes after location payload",
                details={'consumed': unpacker.tell(), 'size': len(data)},
            )

        return GeoPoint._from_radians(
            fields[LONGITUDE_INDEX],
            fields[LATITUDE_INDEX],
            fields[ALTITUDE_INDEX],
        )

    def _read_map(self, unpacker: msgpack.Unpacker, data: bytes) -> Dict[int, float]:
        fields = {}
        for _ in range(unpacker.read_map_header()):
            index = self._read_index(unpacker, data)
            if index >= FIELD_COUNT:
                unpacker.skip()
                continue
            if index in fields:
                raise MalformedDataError("Duplicate field", field_index=index)
            fields[index] = self._read_float64(unpacker, data, index)
        return fields

    def _read_array(self, unpacker: msgpack.Unpacker, data: bytes) -> Dict[int, float]:
        fields = {}
        for index in range(unpacker.read_array_header()):
            if index >= FIELD_COUNT:
                unpacker.skip()
                continue
            fields[index] = self._read_float64(unpacker, data, index)
        return fields

    @staticmethod
    def _read_index(unpacker: msgpack.Unpacker, data: bytes) -> int:
        # Keys are classified by header byte; only integers are ever unpacked
        marker = _peek(unpacker, data)
        if not (_is_unsigned_int_header(marker) or _is_signed_int_header(marker)):
            raise MalformedDataError(
                "Field index must be a non-negative integer",
                details={'marker': marker},
            )
        index = unpacker.unpack()
        if index < 0:
            raise MalformedDataError(
                f"Field index must be a non-negative integer, got {index}"
            )
        return index

    @staticmethod
    def _read_float64(unpacker: msgpack.Unpacker, data: bytes, index: int) -> float:
        start = unpacker.tell()
        marker = _peek(unpacker, data)
        if marker != _FLOAT64_MARKER:
            unpacker.skip()
            raise MalformedDataError(
                "Field is not an 8-byte float",
                field_index=index,
                details={'width': unpacker.tell() - start, 'marker': marker},
            )
        return unpacker.unpack()


_default_codec = LocationCodec()


def encode(point: GeoPoint) -> bytes:
    """Encode a point with the default (map layout) codec."""
    return _default_codec.encode(point)


def decode(data: bytes) -> GeoPoint:
    """Decode a point with the default codec."""
    return _default_codec.decode(data)
