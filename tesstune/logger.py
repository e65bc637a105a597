import logging
import os
import sys

ROOT_LOGGER = "tesstune"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _configure_root(level):
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return root


def get_logger(name=ROOT_LOGGER, level=None):
    """Return a logger under the ``tesstune`` hierarchy.

    Only the package logger owns a stdout handler; module loggers propagate to
    it. ``LOG_LEVEL`` sets the level when ``level`` is not given.
    """
    _configure_root(level or os.getenv("LOG_LEVEL", "INFO"))
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
