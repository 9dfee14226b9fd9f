"""Process-wide logging setup."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler if none exists and set the ``envelope`` log level.

    ``basicConfig`` is a no-op once the root logger has handlers (uvicorn's own
    config, pytest), so the package logger level is set explicitly.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("envelope").setLevel(level.upper())
