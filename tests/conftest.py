import os
from typing import Generator

import pytest
import yaml
from starlette.testclient import TestClient

from tests.helpers import FakePackwireConfig

from packwire.bootstrap.config.settings import PackwireConfig
from packwire.core.extract import MsgPackExtractor
from packwire.core.respond import MsgPackRenderer
from packwire.core.routing.router import Router
from packwire.infra.msgpack_serializer import MsgPackSerializer
from packwire.infra.starlette.app import build_app


@pytest.fixture
def serializer():
    return MsgPackSerializer()


@pytest.fixture
def extractor(serializer):
    return MsgPackExtractor(serializer)


@pytest.fixture
def renderer(serializer):
    return MsgPackRenderer(serializer)


@pytest.fixture(scope="session")
def config_file(tmp_path_factory):
    base = tmp_path_factory.mktemp("config")
    file = base / "packwire.yaml"

    data = {
        "server": {
            "host": "0.0.0.0",
            "port": 9000,
        },
        "codec": {
            "subtypes": ["msgpack", "x-msgpack", "X-Vendor-Pack"],
            "suffix": "msgpack",
        },
    }

    file.write_text(yaml.dump(data))
    return file


@pytest.fixture(scope="session")
def packwire_config(config_file) -> Generator[PackwireConfig, None, None]:
    backup = os.environ.copy()

    try:
        os.environ["TEST_PACKWIRECONFIG"] = str(config_file)
        yield FakePackwireConfig()
    finally:
        os.environ.clear()
        os.environ.update(backup)


@pytest.fixture
def router():
    return Router()


@pytest.fixture
def make_client(extractor, renderer):
    def factory(router: Router) -> TestClient:
        app = build_app(router, extractor, renderer)
        return TestClient(app, raise_server_exceptions=False)

    return factory
