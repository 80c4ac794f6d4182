import logging
import sys
from tqdm import tqdm

DEFAULT_SILENCED_LOGGERS = {"aiohttp": "WARNING", "asyncio": "WARNING"}


class LogWithTqdm(logging.Handler):
    """
    Routes log records through `tqdm.write()` on stderr, so stdout only
    carries the JSON report.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level, fallback):
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level if level is not None else fallback


def configure_logger(general_level='WARNING', module_specific_levels=None, silenced_loggers=None):
    """
    Configures the root logger with a single stderr handler and optional
    per-module levels.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    if silenced_loggers is None:
        silenced_loggers = DEFAULT_SILENCED_LOGGERS
    for name, level in silenced_loggers.items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))
