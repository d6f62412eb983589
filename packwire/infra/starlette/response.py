from functools import lru_cache
from collections.abc import Mapping
from typing import Any

from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import Response

from packwire.core.errors import MsgPackRejection
from packwire.core.models.reply import Reply
from packwire.core.respond import MsgPackRenderer
from packwire.infra.msgpack_serializer import MsgPackSerializer


@lru_cache
def default_renderer() -> MsgPackRenderer:
    return MsgPackRenderer(MsgPackSerializer())


class MsgPackResponse(Response):
    """
    Response whose body is `content` encoded as named-field MsgPack.

    If `content` cannot be encoded the response becomes a
    500 text/plain carrying the encoder's error message.
    """
    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        background: BackgroundTask | None = None,
        renderer: MsgPackRenderer | None = None,
    ) -> None:
        renderer = renderer or default_renderer()
        reply = renderer.render(content, status_code=status_code, headers=headers)
        super().__init__(
            content=reply.body,
            status_code=reply.status_code,
            headers=reply.headers,
            background=background,
        )


def reply_to_response(reply: Reply) -> Response:
    return Response(
        content=reply.body,
        status_code=reply.status_code,
        headers=reply.headers,
    )


async def rejection_handler(request: Request, exc: Exception) -> Response:
    """Starlette exception handler for MsgPackRejection."""
    if not isinstance(exc, MsgPackRejection):
        raise exc
    return reply_to_response(exc.into_reply())
