"""
Error handling utilities for the wire codec.

Provides a decorator that turns low-level msgpack failures into
MalformedDataError so callers only ever see the package hierarchy.
"""
from functools import wraps
from typing import Callable

from msgpack.exceptions import BufferFull, OutOfData, FormatError, StackError

from geo_protocol.utils.logging_config import get_logger
from geo_protocol.utils.exceptions import MalformedDataError

logger = get_logger(__name__)


def translate_unpack_errors(func: Callable) -> Callable:
    """
    Decorator mapping msgpack unpacking errors to MalformedDataError.

    Every failure is logged as a ``malformed_location_payload`` warning
    carrying ``reason`` and ``field_index`` (None when no field is known).

    Raises
    ------
    MalformedDataError
        If msgpack reports truncated, oversized, invalid or too deeply
        nested data, or builds an object it cannot hash
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except MalformedDataError as e:
            logger.warning(
                "malformed_location_payload",
                reason=str(e),
                field_index=e.field_index,
            )
            raise
        except OutOfData as e:
            logger.warning("malformed_location_payload", reason="truncated", field_index=None)
            raise MalformedDataError("Location payload is truncated") from e
        except BufferFull as e:
            logger.warning("malformed_location_payload", reason="too large", field_index=None)
            raise MalformedDataError("Location payload exceeds the unpacker buffer") from e
        except (FormatError, StackError, ValueError, TypeError) as e:
            logger.warning("malformed_location_payload", reason=str(e), field_index=None)
            raise MalformedDataError(
                f"Location payload is not valid msgpack: {e}"
            ) from e
    return wrapper
