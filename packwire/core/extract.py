import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from packwire.core.errors import (
    BodyUnavailable,
    DecodeError,
    HeadersAlreadyExtracted,
    InvalidMsgPackBody,
    UnsupportedContentType,
)
from packwire.core.mime import is_msgpack_content_type
from packwire.core.models.config import DEFAULT_MATCHER, MatcherConfig
from packwire.core.ports.request import RequestParts
from packwire.core.ports.serializer import Serializer
from packwire.core.values import to_value


class MsgPackExtractor:
    """
    Inbound adapter: turns a MsgPack request body into a typed value.

    Extraction runs in a fixed order and stops at the first failure:

    1. the request headers must still be available
       (HeadersAlreadyExtracted otherwise),
    2. the Content-Type must designate MsgPack
       (UnsupportedContentType otherwise; the body is not read),
    3. the body is read once from the framework
       (BodyUnavailable if the framework cannot supply it),
    4. the bytes are decoded and validated against the expected type
       (InvalidMsgPackBody on any codec or validation failure).

    Decoding is all-or-nothing: a value is returned only when both the
    codec and the validation step succeed.
    """

    def __init__(
        self,
        serializer: Serializer,
        config: MatcherConfig = DEFAULT_MATCHER,
    ) -> None:
        self._serializer = serializer
        self._config = config
        self._logger = logging.getLogger("core.extract")

    def accepts(self, headers: Mapping[str, Any]) -> bool:
        return is_msgpack_content_type(content_type(headers), self._config)

    async def extract(self, parts: RequestParts, target: Any = Any) -> Any:
        headers = parts.headers()
        if headers is None:
            self._logger.debug("Headers already extracted")
            raise HeadersAlreadyExtracted()

        if not self.accepts(headers):
            self._logger.debug(f"Unsupported content type: {content_type(headers)!r}")
            raise UnsupportedContentType()

        try:
            data = await parts.body()
        except Exception as exc:
            self._logger.debug(f"Request body unavailable: {exc}")
            raise BodyUnavailable(str(exc)) from exc

        try:
            raw = self._serializer.deserialize(data)
            return to_value(raw, target)
        except (DecodeError, ValidationError) as exc:
            self._logger.debug(f"Invalid MsgPack body: {exc}")
            raise InvalidMsgPackBody(str(exc)) from exc


def content_type(headers: Mapping[str, Any]) -> Any:
    for name, value in headers.items():
        if name.lower() == "content-type":
            return value
    return None
