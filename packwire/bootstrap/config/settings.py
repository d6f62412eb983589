from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from packwire.bootstrap.config.loader import get_configfile
from packwire.core.mime import is_token
from packwire.core.models.config import MatcherConfig


class ServerSettings(BaseModel):
    host: Annotated[
        str,
        Field(
            description="Bind address for the HTTP server.",
            default="127.0.0.1"
        )
    ]

    port: Annotated[
        int,
        Field(
            description="TCP port for the HTTP server.",
            default=8000
        )
    ]

    debug: Annotated[
        bool,
        Field(
            description="Serve tracebacks for unhandled errors. Never enable in production.",
            default=False
        )
    ]


class CodecSettings(BaseModel):
    subtypes: Annotated[
        list[str],
        Field(
            description=(
                "Subtypes of 'application/*' accepted verbatim as MsgPack.\n"
                "Matching is exact after lowercasing; parameters are ignored."
            ),
            default_factory=lambda: ["msgpack", "x-msgpack"]
        )
    ]

    suffix: Annotated[
        str,
        Field(
            description=(
                "Structured syntax suffix accepted on any 'application/*' subtype,\n"
                "e.g. 'application/vnd.acme.order+msgpack'."
            ),
            default="msgpack"
        )
    ]

    @field_validator("subtypes")
    @classmethod
    def validate_subtypes(cls, v: list[str]) -> list[str]:
        for subtype in v:
            if not is_token(subtype):
                raise ValueError(f"'{subtype}' is not a valid media subtype")
        return [s.lower() for s in v]

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        if not is_token(v) or "+" in v:
            raise ValueError(f"'{v}' is not a valid structured suffix")
        return v.lower()

    def to_matcher(self) -> MatcherConfig:
        return MatcherConfig(subtypes=frozenset(self.subtypes), suffix=self.suffix)


class PackwireConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PACKWIRE_",
        env_nested_delimiter="__",
        extra="allow"
    )

    server: Annotated[
        ServerSettings,
        Field(
            description="HTTP server configuration.",
            default_factory=ServerSettings
        )
    ]

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "MsgPack content negotiation.\n"
                "Controls which request Content-Types are decoded as MsgPack."
            ),
            default_factory=CodecSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings
        return init_settings, env_settings, YamlConfigSettingsSource(settings_cls, yaml_file=configfile)
