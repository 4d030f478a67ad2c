import logging
from pathlib import Path
from typing import List, Union

from .filters import errors_over_severity
from .ingest import parse_log_file
from .render import show_log_message

logger = logging.getLogger(__name__)


def show_errors_over_severity(file_content: str, severity: int) -> List[str]:
    """
    Raw text → parsed logs → errors over `severity` → display strings.
    """
    logs = parse_log_file(file_content)
    errors = errors_over_severity(logs, severity)

    logger.debug(
        "%d of %d kept logs are errors over severity %d",
        len(errors),
        len(logs),
        severity,
    )

    return [show_log_message(log) for log in errors]


def read_log_file(path: Union[str, Path]) -> str:
    """
    Read a whole log file as text.

    OSError (missing file, permissions) propagates to the caller.
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def show_errors_in_file(path: Union[str, Path], severity: int) -> List[str]:
    return show_errors_over_severity(read_log_file(path), severity)
