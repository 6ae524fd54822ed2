from __future__ import annotations

import logging

import uvicorn

from ..config import load_config


def main() -> None:
    cfg = load_config()
    logging.basicConfig(level=cfg.log_level)
    uvicorn.run(
        "soy.server.api:app",
        host=cfg.server.host,
        port=cfg.server.port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
