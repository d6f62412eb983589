import uuid

from starlette.requests import Request
from starlette.responses import Response

from packwire.bootstrap.deps import get_router
from packwire.bootstrap.schemas import Item, StoredItem
from packwire.infra.starlette.request import read_msgpack
from packwire.infra.starlette.response import MsgPackResponse


router = get_router()


@router.request("/echo", methods=["POST"])
async def echo(request: Request) -> Response:
    data = await read_msgpack(request, extractor=request.app.state.extractor)
    return MsgPackResponse(data, renderer=request.app.state.renderer)


@router.request("/items", methods=["POST"])
async def create_item(request: Request) -> Response:
    item = await read_msgpack(request, Item, extractor=request.app.state.extractor)
    stored = StoredItem(id=uuid.uuid4(), **item.model_dump())
    return MsgPackResponse(stored, status_code=201, renderer=request.app.state.renderer)


@router.request("/health", methods=["GET"])
async def health(request: Request) -> Response:
    return MsgPackResponse({"status": "ok"}, renderer=request.app.state.renderer)
