from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_LEVEL_VAR = "MINILISP_LOG_LEVEL"
PRELUDE_PATH_VAR = "MINILISP_PRELUDE_PATH"

_DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    raw = os.environ.get(LOG_LEVEL_VAR, _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR}={raw!r} is not a logging level")
    return level


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get(PRELUDE_PATH_VAR)
    if not raw or not raw.strip():
        return None
    return Path(raw.strip())


def configure_logging() -> None:
    """Set the `minilisp` logger level from the environment."""
    logging.getLogger("minilisp").setLevel(get_log_level())
