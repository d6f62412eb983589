import argparse
import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def get_cli_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="packwire-echo",
        description=(
            "Start a packwire echo service.\n\n"
            "The service speaks MsgPack over HTTP: request bodies are decoded\n"
            "according to their Content-Type and responses are encoded as\n"
            "application/msgpack."
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to a packwire configuration file"
    )

    parser.add_argument(
        "-l", "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=(
            "Logging verbosity for the service.\n"
            "Choose among: DEBUG, INFO, WARNING, ERROR, CRITICAL.\n\n"
            "DEBUG    → also logs every rejected request and its reason.\n"
            "INFO     → standard operational logs (default).\n"
            "WARNING  → only warnings and errors.\n"
            "ERROR    → only errors, including unencodable responses.\n"
            "CRITICAL → only critical failures.\n\n"
            "Example:\n"
            "  --log-level DEBUG"
        ),
    )

    return parser.parse_args()


def resolve_configfile(raw: str | None) -> Path | None:
    """
    Locate the configuration file.

    Priority: explicit path (CLI or ENV) > ./packwire.yaml.
    An explicit path must exist; the default file is optional.
    """
    if raw is None:
        file = Path.cwd() / "packwire.yaml"
        return file if file.is_file() else None

    file = Path(raw)
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            "  - Or set the PACKWIRECONFIG environment variable\n"
            "  - Or place a 'packwire.yaml' file in the current working directory."
        )

    return file


@lru_cache
def get_configfile() -> Path | None:
    args = get_cli_args()
    return resolve_configfile(args.config or os.getenv("PACKWIRECONFIG"))
