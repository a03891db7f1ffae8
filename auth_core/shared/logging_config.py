from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
