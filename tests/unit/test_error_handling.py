"""
Tests for error handling utilities.
"""
import pytest
from msgpack.exceptions import BufferFull, OutOfData, FormatError, StackError
from geo_protocol.utils.error_handling import translate_unpack_errors
from geo_protocol.utils.exceptions import MalformedDataError


def raising(exc):
    @translate_unpack_errors
    def decode(data):
        raise exc
    return decode


class TestTranslateUnpackErrors:
    """Tests for translate_unpack_errors decorator."""

    def test_passes_result_through(self):
        @translate_unpack_errors
        def decode(data):
            return len(data)

        assert decode(b"abc") == 3

    def test_preserves_metadata(self):
        @translate_unpack_errors
        def decode_location(data):
            """Decode a location."""
            return data

        assert decode_location.__name__ == "decode_location"
        assert decode_location.__doc__ == "Decode a location."

    def test_out_of_data(self):
        with pytest.raises(MalformedDataError, match="truncated"):
            raising(OutOfData())(b"")

    @pytest.mark.parametrize("exc", [
        FormatError("bad header"),
        StackError("too deep"),
        ValueError("Unpack failed"),
        TypeError("unhashable type: 'list'"),
    ])
    def test_invalid_msgpack(self, exc):
        with pytest.raises(MalformedDataError) as exc_info:
            raising(exc)(b"")

        assert exc_info.value.__cause__ is exc

    def test_buffer_full(self):
        with pytest.raises(MalformedDataError, match="buffer") as exc_info:
            raising(BufferFull())(b"")

        assert isinstance(exc_info.value.__cause__, BufferFull)

    def test_malformed_data_reraised_unchanged(self):
        original = MalformedDataError("Duplicate field", field_index=1)
        with pytest.raises(MalformedDataError) as exc_info:
            raising(original)(b"")

        assert exc_info.value is original

    def test_other_errors_propagate(self):
        with pytest.raises(KeyError):
            raising(KeyError("field"))(b"")
