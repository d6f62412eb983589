import logging
from collections.abc import Mapping
from typing import Any

from packwire.core.errors import EncodeError
from packwire.core.models.config import DEFAULT_MATCHER, MatcherConfig
from packwire.core.models.reply import Reply
from packwire.core.ports.serializer import Serializer
from packwire.core.values import to_plain


FALLBACK_CONTENT_TYPE = "text/plain; charset=utf-8"


class MsgPackRenderer:
    """
    Outbound adapter: encodes a value as a named-field MsgPack body.

    On success the reply carries the canonical media type, replacing
    any Content-Type already present in `headers`. If the value cannot
    be encoded the reply is a 500 with the error text as a plain-text
    body: an unencodable value is a server bug, not a client error.

    `render` never raises.
    """

    def __init__(
        self,
        serializer: Serializer,
        config: MatcherConfig = DEFAULT_MATCHER,
    ) -> None:
        self._serializer = serializer
        self._config = config
        self._logger = logging.getLogger("core.respond")

    def render(
        self,
        value: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
    ) -> Reply:
        try:
            body = self._serializer.serialize(to_plain(value))
        except EncodeError as exc:
            self._logger.error(f"Failed to encode response body: {exc}")
            return Reply(
                status_code=500,
                body=str(exc).encode("utf-8"),
                headers={"content-type": FALLBACK_CONTENT_TYPE},
            )

        merged = {
            name: val
            for name, val in (headers or {}).items()
            if name.lower() != "content-type"
        }
        merged["content-type"] = self._config.media_type

        return Reply(status_code=status_code, body=body, headers=merged)
