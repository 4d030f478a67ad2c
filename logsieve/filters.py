from typing import Iterable, List

from .types import Error, KnownLog, LogMessage


def is_error_over(log: LogMessage, minimum_severity: int) -> bool:
    return (
        isinstance(log, KnownLog)
        and isinstance(log.level, Error)
        and log.level.severity > minimum_severity
    )


def errors_over_severity(
    logs: Iterable[LogMessage],
    minimum_severity: int,
) -> List[LogMessage]:
    """
    Keep only Error logs strictly above `minimum_severity`, in order.

    Info, Warning and Unknown logs never pass.
    """
    return [log for log in logs if is_error_over(log, minimum_severity)]
