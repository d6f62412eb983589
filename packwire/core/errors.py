from packwire.core.models.reply import Reply


class CodecError(Exception):
    """Raised by a Serializer when a value cannot be converted."""


class EncodeError(CodecError):
    pass


class DecodeError(CodecError):
    pass


class MsgPackRejection(Exception):
    """
    Base class of every reason the inbound adapter refuses a request.

    Each subclass has a stable `kind` so callers can branch on the
    failure class without matching on messages. All rejections are
    client errors by default and are never retried.
    """
    kind: str = "rejected"
    status_code: int = 400
    default_detail: str = "Request rejected"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    def into_reply(self) -> Reply:
        return Reply(
            status_code=self.status_code,
            body=self.detail.encode("utf-8"),
            headers={"content-type": "text/plain; charset=utf-8"},
        )


class HeadersAlreadyExtracted(MsgPackRejection):
    kind = "headers_unavailable"
    default_detail = "Headers taken by another extractor"


class UnsupportedContentType(MsgPackRejection):
    kind = "unsupported_content_type"
    default_detail = "Expected request with `Content-Type: application/msgpack`"


class BodyUnavailable(MsgPackRejection):
    kind = "body_unavailable"
    default_detail = "Failed to buffer the request body"

    def __init__(self, reason: str | None = None) -> None:
        detail = f"{self.default_detail}: {reason}" if reason else None
        super().__init__(detail)


class InvalidMsgPackBody(MsgPackRejection):
    kind = "invalid_body"
    default_detail = "Failed to parse the request body as MsgPack"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{self.default_detail}: {reason}")
