from dataclasses import dataclass
from typing import Union


Timestamp = int


# ---------- Log levels ----------

@dataclass(frozen=True)
class Info:
    pass


@dataclass(frozen=True)
class Warning:  # noqa: A001
    pass


@dataclass(frozen=True)
class Error:
    """
    Error level. Severity only exists here; higher means more severe.
    """
    severity: int


LogLevel = Union[Info, Warning, Error]

INFO = Info()
WARNING = Warning()


# ---------- Log messages ----------

@dataclass(frozen=True)
class KnownLog:
    """
    A line that decoded into one of the I / W / E shapes.
    """
    level: LogLevel
    timestamp: Timestamp
    message: str


@dataclass(frozen=True)
class UnknownLog:
    """
    A single non-blank field that doesn't match any known shape.
    """
    message: str


@dataclass(frozen=True)
class MalformedLog:
    """
    Empty or unparseable line.

    Dropped by the multi-line parser.
    """


LogMessage = Union[KnownLog, UnknownLog, MalformedLog]

MALFORMED = MalformedLog()
