from .filters import errors_over_severity
from .ingest import IngestStats, ingest_lines, parse_log, parse_log_file
from .pipeline import read_log_file, show_errors_in_file, show_errors_over_severity
from .render import show_log_message
from .sample import SAMPLE_LOG
from .types import (
    INFO,
    MALFORMED,
    WARNING,
    Error,
    Info,
    KnownLog,
    LogLevel,
    LogMessage,
    MalformedLog,
    UnknownLog,
    Warning,
)

__all__ = [
    "INFO",
    "MALFORMED",
    "SAMPLE_LOG",
    "WARNING",
    "Error",
    "Info",
    "IngestStats",
    "KnownLog",
    "LogLevel",
    "LogMessage",
    "MalformedLog",
    "UnknownLog",
    "Warning",
    "errors_over_severity",
    "ingest_lines",
    "parse_log",
    "parse_log_file",
    "read_log_file",
    "show_errors_in_file",
    "show_errors_over_severity",
    "show_log_message",
]
