from typing import List, Optional

from .result import Ok, parse_int_safe
from .types import INFO, WARNING, Error, KnownLog, LogLevel, LogMessage, UnknownLog


# -----------------------------
# INFO / WARNING PARSER
# -----------------------------

def _parse_leveled(level: LogLevel, fields: List[str]) -> Optional[KnownLog]:
    _, ts, message = fields

    timestamp = parse_int_safe(ts)
    if not isinstance(timestamp, Ok):
        return None

    return KnownLog(level=level, timestamp=timestamp.value, message=message)


def parse_info(fields: List[str]) -> Optional[KnownLog]:
    """
    Parse lines like:
      I,147,mice in the air
    """
    return _parse_leveled(INFO, fields)


def parse_warning(fields: List[str]) -> Optional[KnownLog]:
    """
    Parse lines like:
      W,149,could've been bad
    """
    return _parse_leveled(WARNING, fields)


# -----------------------------
# ERROR PARSER
# -----------------------------

def parse_error(fields: List[str]) -> Optional[KnownLog]:
    """
    Parse lines like:
      E,5,158,some strange error

    Both severity and timestamp must be integers.
    """
    _, sev, ts, message = fields

    severity = parse_int_safe(sev)
    if not isinstance(severity, Ok):
        return None

    timestamp = parse_int_safe(ts)
    if not isinstance(timestamp, Ok):
        return None

    return KnownLog(
        level=Error(severity.value),
        timestamp=timestamp.value,
        message=message,
    )


# -----------------------------
# SINGLE FIELD PARSER
# -----------------------------

def parse_unknown(fields: List[str]) -> Optional[LogMessage]:
    (message,) = fields
    return UnknownLog(message)
