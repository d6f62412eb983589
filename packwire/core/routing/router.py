import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Awaitable, Callable


RouteHandler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class RouteSpec:
    path: str
    methods: tuple[str, ...]
    handler: RouteHandler


class Router:
    """
    A minimal path-to-handler registry.

    Handlers are registered once per path through the `request` decorator.
    Attempting to register a second handler for the same path raises a
    RuntimeError.

    The Router does not dispatch requests itself; the web binding turns
    the registered routes into framework routes.
    """

    def __init__(self) -> None:
        self._routes: dict[str, RouteSpec] = {}
        self._logger = logging.getLogger("core.routing.router")

    def request(
        self,
        path: str,
        methods: Sequence[str] = ("POST",),
    ) -> Callable[[RouteHandler], RouteHandler]:
        def decorator(func: RouteHandler) -> RouteHandler:
            if path in self._routes:
                raise RuntimeError(f"Handler already registered for '{path}'")

            verbs = tuple(m.upper() for m in methods)
            self._routes[path] = RouteSpec(path=path, methods=verbs, handler=func)
            self._logger.debug(f"Registered {'/'.join(verbs)} {path}")
            return func

        return decorator

    def routes(self) -> dict[str, RouteSpec]:
        return dict(self._routes)
