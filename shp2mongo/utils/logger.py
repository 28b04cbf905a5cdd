import logging
import sys
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime

_LOGGER_NAME = "shp2mongo"
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '../..'))
_LOG_DIR = os.path.join(_PROJECT_ROOT, 'logs')
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_MAX_LINES = 5000
_BACKUP_COUNT = 20


class LineRotatingFileHandler(RotatingFileHandler):
    """
    Rotates the import log after a number of lines instead of bytes.
    Feature documents are logged one per line, so this keeps each log file
    readable regardless of geometry size.
    """
    def __init__(self, filename, maxLines, backupCount=0, encoding=None):
        super().__init__(filename, maxBytes=0, backupCount=backupCount, encoding=encoding)
        self.maxLines = maxLines
        self.lineCount = 0
        self._count_existing_lines()

    def _count_existing_lines(self):
        try:
            with open(self.baseFilename, 'r', encoding=self.encoding or 'utf-8') as f:
                self.lineCount = sum(1 for _ in f)
        except FileNotFoundError:
            self.lineCount = 0

    def emit(self, record):
        super().emit(record)
        self.lineCount += 1
        if self.lineCount >= self.maxLines:
            self.doRollover()
            self.lineCount = 0


def setup_logger(log_dir=None, level=logging.INFO):
    """
    Set up the shp2mongo logger: stdout plus a timestamped file in logs/.
    Call this once at program startup (the CLI does it).
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        formatter = logging.Formatter(_LOG_FORMAT)

        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        log_dir = log_dir or _LOG_DIR
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"shp2mongo_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
        fh = LineRotatingFileHandler(log_file, maxLines=_MAX_LINES, backupCount=_BACKUP_COUNT, encoding="utf-8")
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    return logger


def get_logger(name=None):
    """
    Get the shared project logger, or a child of it when name is given.
    """
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)
