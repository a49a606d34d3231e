import logging
import sys
from datetime import datetime

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


class ProgressLogger:
    """
    Reports progress through a batch of lines as log records.

    Logs at every 10% step and on completion, with an ETA once a rate is known.
    """
    def __init__(self, total, desc="Checking", logger=None):
        self.total = total
        self.done = 0
        self.desc = desc
        self.logger = logger or logging.getLogger(__name__)
        self.started = datetime.now()
        self.last_percent = -1

    @property
    def percent(self):
        return int(self.done * 100 / self.total) if self.total > 0 else 100

    def update(self, n=1):
        """Advance by n items, logging if a 10% step was crossed."""
        self.done = min(self.done + n, self.total)
        if self.percent - self.last_percent < 10 and self.done != self.total:
            return

        message = f"{self.desc}: {self.done}/{self.total} ({self.percent}%)"
        elapsed = (datetime.now() - self.started).total_seconds()
        if self.done < self.total and elapsed > 0 and self.done > 0:
            remaining = (self.total - self.done) / (self.done / elapsed)
            message += f" [ETA: {int(remaining)}s]"

        self.logger.info(message)
        self.last_percent = self.percent

    def close(self):
        """Log completion if the last update didn't reach the total."""
        if self.last_percent < 100:
            self.done = self.total
            self.update(0)


def setup_logging(log_file=None, level=logging.INFO, debug=False):
    """
    Configure the root logger for command-line use.

    Args:
        log_file: Optional path; records are appended to it as well as stdout.
        level: Logging level when not in debug mode.
        debug: Switch to DEBUG with logger name and source location.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.debug("=" * 80)
    logging.debug(f"valsi run started - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.debug("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message, then each context entry on its own DEBUG line.

    Values longer than 200 characters are truncated.
    """
    logger = logger or logging.getLogger('valsi')
    logger.log(level, message)

    if not context or not logger.isEnabledFor(logging.DEBUG):
        return
    for key, value in context.items():
        text = str(value)
        if len(text) > 200:
            text = text[:200] + "..."
        logger.debug(f"  └─ {key}: {text}")
