import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .detect import LineShape, detect_shape, split_fields, split_lines
from .parsers import parse_error, parse_info, parse_unknown, parse_warning
from .types import MALFORMED, KnownLog, LogMessage, MalformedLog, UnknownLog

logger = logging.getLogger(__name__)


PARSERS = {
    LineShape.INFO: parse_info,
    LineShape.WARNING: parse_warning,
    LineShape.ERROR: parse_error,
    LineShape.SINGLE: parse_unknown,
}


def parse_log(line: str) -> LogMessage:
    """
    Parse a single raw log line into a LogMessage.

    Pipeline:
      raw line
        → field split
          → shape detection
            → shape-specific parser
              → LogMessage

    This function must:
      - never throw
      - return MalformedLog for anything it can't decode
      - be deterministic
    """
    fields = split_fields(line)
    parser = PARSERS.get(detect_shape(fields))
    if parser is None:
        return MALFORMED

    parsed: Optional[LogMessage] = parser(fields)
    if parsed is None:
        return MALFORMED

    return parsed


# ---------- Metrics ----------

@dataclass
class IngestStats:
    known: int = 0
    unknown: int = 0
    malformed: int = 0

    @property
    def kept(self) -> int:
        return self.known + self.unknown

    @property
    def total(self) -> int:
        return self.kept + self.malformed

    def record(self, message: LogMessage):
        if isinstance(message, KnownLog):
            self.known += 1
        elif isinstance(message, UnknownLog):
            self.unknown += 1
        else:
            self.malformed += 1


# ---------- Multi-line ----------

def ingest_lines(
    lines: Iterable[str],
    stats: Optional[IngestStats] = None,
) -> Iterator[LogMessage]:
    """
    Parse lines in order, yielding Known/Unknown logs.

    Malformed lines are counted (when stats is given) and dropped.
    """
    for lineno, line in enumerate(lines, 1):
        message = parse_log(line)
        if stats is not None:
            stats.record(message)

        if isinstance(message, MalformedLog):
            logger.debug("dropping malformed line %d: %r", lineno, line)
            continue

        yield message


def parse_log_file(
    file_content: str,
    stats: Optional[IngestStats] = None,
) -> List[LogMessage]:
    """
    "I,147,mice in the air\\nX blblbaaaaa"
      -> [KnownLog(Info(), 147, "mice in the air"), UnknownLog("X blblbaaaaa")]
    """
    return list(ingest_lines(split_lines(file_content), stats))
