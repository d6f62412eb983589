import msgpack
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from packwire.core.errors import DecodeError, EncodeError
from packwire.core.ports.serializer import Serializer


def encode_leaf(obj: Any) -> Any:
    """
    `default` hook for the packer: values msgpack has no type for
    (UUID, datetime, Enum, Decimal, ...) are sent in their JSON form.
    Sets are refused since they have no order to preserve.
    """
    if isinstance(obj, (set, frozenset)):
        raise TypeError(f"can not serialize {type(obj).__name__!r} object")

    try:
        return to_jsonable_python(obj)
    except PydanticSerializationError as exc:
        raise TypeError(str(exc)) from exc


class MsgPackSerializer(Serializer):
    """
    MsgPack-based implementation of the Serializer interface.

    - str and bytes are kept apart on the wire (bin type)
    - maps keep their keys, so records travel with field names
    - map keys may be any hashable msgpack value, e.g. integers
    - a body must hold exactly one object; trailing bytes are an error
    """
    def serialize(self, message: Any) -> bytes:
        try:
            return msgpack.packb(message, use_bin_type=True, default=encode_leaf)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodeError(str(exc)) from exc

    def deserialize(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (msgpack.UnpackException, ValueError, TypeError) as exc:
            raise DecodeError(str(exc) or type(exc).__name__) from exc
