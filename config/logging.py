"""
Logging setup for the Streamlit app.

Services log through module-level loggers; this module only wires the
root handler once per process and masks secrets in every record.
"""

import logging
import re
from typing import Iterable

REDACTED = "[redacted]"

_BEARER_PATTERN = re.compile(r"(Bearer\s+)([A-Za-z0-9\-._~+/=]+)", re.IGNORECASE)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts configured secrets from log records."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets = [s.strip() for s in secrets if s and s.strip()]

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        sanitized = _BEARER_PATTERN.sub(r"\1" + REDACTED, message)
        for secret in self._secrets:
            sanitized = sanitized.replace(secret, REDACTED)

        if sanitized != message:
            record.msg = sanitized
            record.args = ()
        return True


def configure_logging(level: str = "INFO", secrets: Iterable[str] = ()) -> None:
    """
    Configure the root logger.

    Streamlit re-executes the script on every interaction, so the handler
    is only installed the first time; later calls just update the level.

    Args:
        level: Log level name (e.g., 'INFO', 'DEBUG')
        secrets: Values that must never appear in log output
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers:
        if getattr(handler, "_checkmarket", False):
            return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler.addFilter(SensitiveDataFilter(secrets))
    handler._checkmarket = True
    root.addHandler(handler)
