from dataclasses import dataclass, field


@dataclass(frozen=True)
class MediaType:
    """
    Parsed form of a `Content-Type` value:

        type "/" subtype ["+" suffix] *(";" name "=" value)

    Type, subtype, suffix and parameter names are stored lowercased.
    The suffix is part of `subtype` as well; it is exposed separately
    for structured syntax matching (RFC 6839).
    """
    type: str
    subtype: str
    suffix: str | None = None
    params: dict[str, str] = field(default_factory=dict, compare=False)
