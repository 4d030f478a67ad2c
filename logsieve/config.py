import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


# ---------------- Defaults ----------------

DEFAULT_MIN_SEVERITY = 2
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    min_severity: int = DEFAULT_MIN_SEVERITY
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def load_settings() -> Settings:
    """
    Read settings from the environment (and .env, if present).

      LOGSIEVE_MIN_SEVERITY  int, errors must be strictly above this
      LOGSIEVE_LOG_LEVEL     logging level name
      LOGSIEVE_LOG_FILE      default log file for the CLI
    """
    raw_severity = os.getenv("LOGSIEVE_MIN_SEVERITY")
    min_severity = DEFAULT_MIN_SEVERITY
    if raw_severity:
        try:
            min_severity = int(raw_severity)
        except ValueError as e:
            raise ValueError(
                f"LOGSIEVE_MIN_SEVERITY must be an integer, got {raw_severity!r}"
            ) from e

    log_level = (os.getenv("LOGSIEVE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    # getLevelName maps known names to their int, anything else to a string
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(
            f"LOGSIEVE_LOG_LEVEL must be a logging level name, got {log_level!r}"
        )

    return Settings(
        min_severity=min_severity,
        log_level=log_level,
        log_file=os.getenv("LOGSIEVE_LOG_FILE") or None,
    )
