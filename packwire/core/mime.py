from packwire.core.models.config import DEFAULT_MATCHER, MatcherConfig
from packwire.core.models.media import MediaType


TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~"
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

WHITESPACE = " \t"


def is_token(value: str) -> bool:
    return bool(value) and all(c in TOKEN_CHARS for c in value)


def header_text(value: str | bytes | None) -> str | None:
    """
    Return the header value as text, or None when it is absent or
    contains anything other than visible ASCII, space and tab.
    """
    if value is None:
        return None

    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError:
            return None

    if not all(c == "\t" or " " <= c <= "~" for c in value):
        return None

    return value


def parse_media_type(value: str) -> MediaType | None:
    """
    Parse a Content-Type value.

    Returns None instead of raising when the value is not a well-formed
    media type: an unparsable header is treated as unrecognized.
    """
    essence, sep, rest = value.partition(";")
    type_, slash, subtype = essence.strip(WHITESPACE).partition("/")

    if not slash or not is_token(type_) or not is_token(subtype):
        return None

    params = _parse_params(sep + rest)
    if params is None:
        return None

    subtype = subtype.lower()
    plus = subtype.rfind("+")
    suffix = subtype[plus + 1:] if plus != -1 else None

    return MediaType(
        type=type_.lower(),
        subtype=subtype,
        suffix=suffix or None,
        params=params,
    )


def matches(mime: MediaType, config: MatcherConfig = DEFAULT_MATCHER) -> bool:
    if mime.type != config.primary:
        return False
    return mime.subtype in config.subtypes or mime.suffix == config.suffix


def is_msgpack_content_type(
    header: str | bytes | None,
    config: MatcherConfig = DEFAULT_MATCHER,
) -> bool:
    """
    Classify a Content-Type header as MsgPack or not.

    Total over its input: absent, non-ASCII and malformed values all
    classify as "not matching". Parameters are ignored.
    """
    text = header_text(header)
    if text is None:
        return False

    mime = parse_media_type(text)
    if mime is None:
        return False

    return matches(mime, config)


def _parse_params(text: str) -> dict[str, str] | None:
    params: dict[str, str] = {}
    pos = 0
    end = len(text)

    while True:
        pos = _skip_ws(text, pos)
        if pos == end:
            return params

        if text[pos] != ";":
            return None

        pos = _skip_ws(text, pos + 1)
        if pos == end:
            return params

        eq = text.find("=", pos)
        if eq == -1:
            return None

        name = text[pos:eq]
        if not is_token(name):
            return None

        pos = eq + 1
        if pos < end and text[pos] == '"':
            value, pos = _read_quoted(text, pos)
            if value is None:
                return None
        else:
            start = pos
            while pos < end and text[pos] in TOKEN_CHARS:
                pos += 1
            value = text[start:pos]
            if not value:
                return None

        params[name.lower()] = value


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _read_quoted(text: str, pos: int) -> tuple[str | None, int]:
    # pos points at the opening quote
    buf: list[str] = []
    i = pos + 1

    while i < len(text):
        c = text[i]
        if c == "\\":
            if i + 1 == len(text):
                break
            buf.append(text[i + 1])
            i += 2
            continue
        if c == '"':
            return "".join(buf), i + 1
        buf.append(c)
        i += 1

    return None, pos
