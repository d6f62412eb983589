from starlette.applications import Starlette
from starlette.routing import Route

from packwire.core.errors import MsgPackRejection
from packwire.core.extract import MsgPackExtractor
from packwire.core.respond import MsgPackRenderer
from packwire.core.routing.router import Router
from packwire.infra.starlette.response import rejection_handler


def build_app(
    router: Router,
    extractor: MsgPackExtractor,
    renderer: MsgPackRenderer,
    debug: bool = False,
) -> Starlette:
    """
    Build a Starlette application serving every route of `router`.

    The extractor and renderer are published on `app.state` so handlers
    use the configured codec. Any MsgPackRejection escaping a handler is
    answered with its status code and a plain-text explanation.
    """
    routes = [
        Route(spec.path, spec.handler, methods=list(spec.methods))
        for spec in router.routes().values()
    ]
    app = Starlette(
        debug=debug,
        routes=routes,
        exception_handlers={MsgPackRejection: rejection_handler},
    )
    app.state.extractor = extractor
    app.state.renderer = renderer
    return app
