import logging
import sys

logger = logging.getLogger("kanawidth")
logger.propagate = False

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(level: int = logging.INFO, info_stream=None) -> logging.Logger:
    """(Re)attach the stdout/stderr handler pair to the package logger.

    INFO and below go to *info_stream* (stdout unless given), WARNING and
    above always go to stderr.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.setLevel(level)

    stdout_handler = logging.StreamHandler(info_stream or sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)    # INFO and below
    stdout_handler.addFilter(_BelowWarning())
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger


setup_logging()
