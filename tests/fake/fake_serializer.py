import json
from typing import Any

from packwire.core.errors import DecodeError, EncodeError


class JsonSerializer:
    """Serializer stand-in used to check the adapters only rely on the port."""

    def serialize(self, message: Any) -> bytes:
        try:
            return json.dumps(message).encode()
        except (TypeError, ValueError) as exc:
            raise EncodeError(str(exc)) from exc

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except ValueError as exc:
            raise DecodeError(str(exc)) from exc
