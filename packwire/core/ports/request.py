from collections.abc import Mapping
from typing import Protocol


class RequestParts(Protocol):
    """
    The view of an incoming HTTP request that the inbound adapter needs
    from the surrounding web framework.

    `headers()` returns None once the headers have been moved out by an
    earlier stage of the pipeline. `body()` materializes the whole body
    and may raise whatever the framework raises when it cannot.
    """

    def headers(self) -> Mapping[str, str] | None:
        ...

    async def body(self) -> bytes:
        ...
