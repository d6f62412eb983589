from dataclasses import dataclass


@dataclass(frozen=True)
class MatcherConfig:
    """
    Static description of the media types accepted and produced by the
    MsgPack adapters.

    A Content-Type matches when its primary type equals `primary` and
    either its subtype is one of `subtypes` or its structured suffix
    equals `suffix`. Outbound responses are always tagged with
    `media_type`.
    """
    primary: str = "application"
    """
    Required primary type.
    """

    subtypes: frozenset[str] = frozenset({"msgpack", "x-msgpack"})
    """
    Subtypes recognized verbatim.
    """

    suffix: str = "msgpack"
    """
    Structured syntax suffix recognized on any subtype, e.g. `vnd.foo+msgpack`.
    """

    media_type: str = "application/msgpack"
    """
    Canonical Content-Type set on every encoded response.
    """


DEFAULT_MATCHER = MatcherConfig()
