from enum import IntEnum
import logging

# one level below debug, for the per packet messages
VERBOSE = 5
logging.addLevelName(VERBOSE, 'VERBOSE')

LOGGER_NAME = 'matrixnodes'


class LogLevel(IntEnum):
    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    VERBOSE = VERBOSE

    @classmethod
    def parse(cls, level):
        if isinstance(level, int):
            return cls(level)
        try:
            return cls[str(level).strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown log level: {level}. Available: {", ".join(l.name.lower() for l in cls)}')


def get_logger(name=None):
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level=None, handler=None):
    """
    Attach a handler to the package logger.
    Without a level, MATRIXNODES_LOG_LEVEL from the environment or .env is used.
    Calling this twice replaces the handler instead of adding a second one.
    """
    if level is None:
        from .settings import get_log_level
        level = get_log_level()
    level = LogLevel.parse(level)
    logger = get_logger()

    for h in list(logger.handlers):
        if getattr(h, '_matrixnodes_handler', False):
            logger.removeHandler(h)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(processName)-13s | %(threadName)-13s | %(levelname)-8s | %(message)s',
            datefmt="%Y-%m-%d %X"))
    handler._matrixnodes_handler = True

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
