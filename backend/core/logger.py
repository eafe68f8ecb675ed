# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Centralised logging configuration.

Levels, handlers and formats live in  etc/logging.conf.  The only runtime
value the file needs is the log-file path, which is passed in through the
``defaults`` mapping of :func:`logging.config.fileConfig` and referenced in
the handler ``args`` as ``%(log_file)s``.

The log directory defaults to  <project>/log  and can be redirected with the
TRIVAULT_LOG_DIR environment variable (containers, test runs).

Import the ready-made logger anywhere:
    from core.logger import logger
"""

import logging
import logging.config
import os
from pathlib import Path

# project root: backend/core/logger.py  →  ../../  →  trivault/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_LOGGING_CONF = _PROJECT_ROOT / "etc" / "logging.conf"
_LOG_DIR = Path(os.environ.get("TRIVAULT_LOG_DIR", _PROJECT_ROOT / "log"))
_LOG_FILE = _LOG_DIR / "app.log"

# The rotating handler opens its file at config time
_LOG_DIR.mkdir(parents=True, exist_ok=True)

logging.config.fileConfig(
    str(_LOGGING_CONF),
    defaults={"log_file": _LOG_FILE.as_posix()},
    disable_existing_loggers=False,
)

logger = logging.getLogger("trivault")
