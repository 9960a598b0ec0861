import functools

from .logger import get_logger, LogLevel
from .reportable import Reportable

logger = get_logger('nodes')


class Logger(Reportable):

    # str(self) does not change after construction, so cache the padded variant
    @functools.lru_cache(maxsize=1)
    def _construct_str(self):
        limit = 30
        name = str(self)
        name = name if len(name) < limit else name[:limit - 3] + '...'
        return f"{name: <30}"

    # === Logging Stuff =================
    def error(self, *text):
        self._log(LogLevel.ERROR, *text)

    def warn(self, *text):
        self._log(LogLevel.WARN, *text)

    def info(self, *text):
        self._log(LogLevel.INFO, *text)

    def debug(self, *text):
        self._log(LogLevel.DEBUG, *text)

    def verbose(self, *text):
        self._log(LogLevel.VERBOSE, *text)

    def _log(self, level, *text):
        if logger.isEnabledFor(level):
            logger.log(level, self._prep_log(*text))
        # reporters get every message, they decide themselves what to show
        self._report(log=" ".join(str(t) for t in text), level=level)

    def _prep_log(self, *text):
        txt = " ".join(str(t) for t in text)
        msg = f"{self._construct_str()} | {txt}"
        return msg
