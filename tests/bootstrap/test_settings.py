import pytest
from pydantic import ValidationError

from packwire.bootstrap.config.loader import resolve_configfile
from packwire.bootstrap.config.settings import CodecSettings
from packwire.core.models.config import DEFAULT_MATCHER


@pytest.mark.ut
def test_config_from_yaml(packwire_config):
    assert packwire_config.server.host == "0.0.0.0"
    assert packwire_config.server.port == 9000
    assert packwire_config.server.debug is False
    assert packwire_config.codec.subtypes == ["msgpack", "x-msgpack", "x-vendor-pack"]


@pytest.mark.ut
def test_codec_settings_to_matcher(packwire_config):
    matcher = packwire_config.codec.to_matcher()

    assert matcher.subtypes == frozenset({"msgpack", "x-msgpack", "x-vendor-pack"})
    assert matcher.suffix == "msgpack"
    assert matcher.media_type == "application/msgpack"


@pytest.mark.ut
def test_codec_defaults_match_default_matcher():
    assert CodecSettings().to_matcher() == DEFAULT_MATCHER


@pytest.mark.ut
@pytest.mark.parametrize("data", [
    {"subtypes": ["msg pack"]},
    {"subtypes": [""]},
    {"suffix": "a+b"},
    {"suffix": ""},
])
def test_codec_settings_validation(data):
    with pytest.raises(ValidationError):
        CodecSettings(**data)


@pytest.mark.ut
def test_resolve_configfile(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_configfile(None) is None

    default = tmp_path / "packwire.yaml"
    default.write_text("server: {}\n")
    assert resolve_configfile(None) == default

    with pytest.raises(SystemExit):
        resolve_configfile(str(tmp_path / "missing.yaml"))
