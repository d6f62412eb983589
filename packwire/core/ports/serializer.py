from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding/decoding HTTP message bodies.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input: failures surface as
      EncodeError / DecodeError, never as partial values
    """

    def serialize(self, message: Any) -> bytes:
        """Encode plain Python data into a response body."""

    def deserialize(self, data: bytes) -> Any:
        """Decode a complete request body into plain Python data."""
