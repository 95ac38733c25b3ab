import logging
from pathlib import Path

from otelop import env_vars

LOG_FORMAT = "%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s"


def _build_handlers() -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_dir = env_vars.OTELOP_LOGGING_PATH
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(Path(log_dir) / env_vars.OTELOP_LOGGING_FILE_NAME))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def init_logger(name: str) -> logging.Logger:
    """Return the named logger, attaching otelop handlers on first use.

    Handlers are attached to the ``otelop`` package logger only, so every
    module logger created here shares them through propagation.
    """
    root = logging.getLogger("otelop")
    if not root.handlers:
        for handler in _build_handlers():
            root.addHandler(handler)
        root.setLevel(env_vars.OTELOP_LOGGING_LEVEL.upper())

    return logging.getLogger(name)
