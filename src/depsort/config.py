import logging
import os


__all__ = ['DEPSORT_DELIMITER', 'DEPSORT_LOG_LEVEL']


def log_level(name, default=logging.INFO):
    """
    Convert a level name such as 'debug' to a `logging` level.

    Unknown names return `default`.
    """
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


DEPSORT_DELIMITER = os.environ.get('DEPSORT_DELIMITER') or ':'
DEPSORT_LOG_LEVEL = log_level(os.environ.get('DEPSORT_LOG_LEVEL'))
