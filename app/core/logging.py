import logging
import sys

from loguru import logger

_NOISY_LOGGERS = ('uvicorn.access', 'sqlalchemy.engine', 'httpx', 'httpcore')


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records (uvicorn, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str, json_logs: bool = False) -> None:
    level = level.upper()
    logger.remove()
    logger.add(
        sys.stdout,
        level=level,
        serialize=json_logs,
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    logging.root.handlers = [_InterceptHandler()]
    logging.root.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, logging.root.level))
