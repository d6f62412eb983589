from functools import lru_cache
from typing import Any

from starlette.datastructures import Headers
from starlette.requests import Request

from packwire.core.extract import MsgPackExtractor
from packwire.core.ports.request import RequestParts
from packwire.infra.msgpack_serializer import MsgPackSerializer


class StarletteRequestParts(RequestParts):
    """
    RequestParts backed by a Starlette request.

    Headers can be moved out with `take_headers()`; any extraction
    attempted afterwards sees them as already consumed.
    """
    def __init__(self, request: Request) -> None:
        self._request = request
        self._headers: Headers | None = request.headers

    def headers(self) -> Headers | None:
        return self._headers

    def take_headers(self) -> Headers | None:
        headers, self._headers = self._headers, None
        return headers

    async def body(self) -> bytes:
        # raises ClientDisconnect, or RuntimeError if the stream was consumed
        return await self._request.body()


@lru_cache
def default_extractor() -> MsgPackExtractor:
    return MsgPackExtractor(MsgPackSerializer())


async def read_msgpack(
    request: Request,
    target: Any = Any,
    extractor: MsgPackExtractor | None = None,
) -> Any:
    extractor = extractor or default_extractor()
    return await extractor.extract(StarletteRequestParts(request), target)
