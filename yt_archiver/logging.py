"""Route progress and warnings to stderr.

stdout is reserved for the archived document (``yt-archiver URL > out.html``),
so the root handler always writes to stderr. Level and format come from
config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging
import sys

from yt_archiver.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Transport libraries log one line per request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


class ArchiverLogging:
    """Applies LoggingConfig to the root logger for one CLI run."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = LEVELS.get(config.level.upper().strip(), logging.INFO)
        self._format = config.format or DEFAULT_FORMAT

    @property
    def level(self) -> int:
        return self._level

    def setup(self) -> None:
        """Install a single stderr handler and quiet per-request transport logs.

        Transport loggers stay at WARNING unless DEBUG is requested, in
        which case every request line is shown.
        """
        logging.basicConfig(
            level=self._level,
            format=self._format,
            stream=sys.stderr,
            force=True,
        )
        transport_level = self._level if self._level == logging.DEBUG else max(self._level, logging.WARNING)
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(transport_level)
