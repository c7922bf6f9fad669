from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_SERVER_CONFIG


def main() -> None:
    config = DEFAULT_SERVER_CONFIG
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "street_food_safari.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        workers=1,
    )


if __name__ == "__main__":
    main()
