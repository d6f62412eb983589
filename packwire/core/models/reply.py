from dataclasses import dataclass, field


@dataclass
class Reply:
    """
    Framework-neutral response produced by the adapters.
    The web binding turns it into a full protocol response.
    """
    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str | None:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None
