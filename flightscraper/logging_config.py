import logging
import sys

from tqdm import tqdm

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
QUIET_LOGGERS = ('urllib3', 'requests')


class _ColoredFormatter(logging.Formatter):
    _COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    _RESET = '\033[0m'
    _BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, '')
        if not color:
            return super().format(record)
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{self._BOLD}{record.levelname}{self._RESET}"
        return super().format(colored)


class TqdmLoggingHandler(logging.StreamHandler):
    """Writes through tqdm.write so log lines don't tear the pairing progress bar."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def setup_logging(level: int | str = logging.INFO) -> None:
    """Console logging for one scraper run; colored level names when stdout is a terminal."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = TqdmLoggingHandler(sys.stdout)
    handler.setLevel(level)
    formatter_cls = _ColoredFormatter if sys.stdout.isatty() else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
