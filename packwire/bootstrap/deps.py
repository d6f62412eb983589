import json
from functools import lru_cache

from pydantic import ValidationError
from starlette.applications import Starlette

from packwire.bootstrap.config.settings import PackwireConfig
from packwire.core.extract import MsgPackExtractor
from packwire.core.models.config import MatcherConfig
from packwire.core.respond import MsgPackRenderer
from packwire.core.routing.router import Router
from packwire.infra.msgpack_serializer import MsgPackSerializer
from packwire.infra.starlette.app import build_app


@lru_cache
def get_router() -> Router:
    return Router()


@lru_cache
def get_serializer() -> MsgPackSerializer:
    return MsgPackSerializer()


@lru_cache
def get_matcher() -> MatcherConfig:
    return get_config().codec.to_matcher()


@lru_cache
def get_app() -> Starlette:
    config = get_config()
    matcher = get_matcher()

    return build_app(
        router=get_router(),
        extractor=MsgPackExtractor(get_serializer(), matcher),
        renderer=MsgPackRenderer(get_serializer(), matcher),
        debug=config.server.debug,
    )


@lru_cache
def get_config() -> PackwireConfig:
    try:
        return PackwireConfig()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(part) for part in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))
