import logging

import uvicorn

from packwire.bootstrap.config.loader import get_cli_args
from packwire.bootstrap.deps import get_app, get_config
from packwire.core.helpers.utils import setup_logging, scan


@scan("packwire.bootstrap.handlers")
def main():
    cli = get_cli_args()
    setup_logging(cli.log_level)

    config = get_config()
    logger = logging.getLogger("bootstrap.boot")
    logger.info(f"Starting packwire on {config.server.host}:{config.server.port}")

    uvicorn.run(
        get_app(),
        host=config.server.host,
        port=config.server.port,
        log_level=cli.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
