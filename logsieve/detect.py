from enum import Enum, auto
from typing import List


FIELD_SEPARATOR = ","
LINE_SEPARATOR = "\n"

# Characters str.isspace() accepts that still count as content
# (no-break spaces and NEL).
NON_BLANK_SPACES = frozenset("\x85\xa0\u2007\u202f")


class LineShape(Enum):
    """
    Structural shape of a log line.

    This is about field layout only; whether the numbers
    actually parse is decided later.
    """
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    SINGLE = auto()
    OTHER = auto()


# tag -> number of fields expected for that tag
TAGGED_SHAPES = {
    "I": (LineShape.INFO, 3),
    "W": (LineShape.WARNING, 3),
    "E": (LineShape.ERROR, 4),
}


def split_dropping_trailing(text: str, separator: str) -> List[str]:
    """
    Split on `separator`, dropping trailing empty parts.

    An empty text is still one empty part.
    """
    if text == "":
        return [""]

    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()

    return parts


def split_fields(line: str) -> List[str]:
    """
    Split a line on commas.

    "I,1," has two fields, "" has one empty field.
    Fields are NOT stripped.
    """
    return split_dropping_trailing(line, FIELD_SEPARATOR)


def split_lines(file_content: str) -> List[str]:
    """
    Split text into lines. A final newline does not add an empty line.
    """
    return split_dropping_trailing(file_content, LINE_SEPARATOR)


def is_blank(text: str) -> bool:
    return all(ch.isspace() and ch not in NON_BLANK_SPACES for ch in text)


def detect_shape(fields: List[str]) -> LineShape:
    """
    Classify already split fields.

    Must be deterministic and must NEVER throw.
    """
    if fields:
        tagged = TAGGED_SHAPES.get(fields[0])
        if tagged and len(fields) == tagged[1]:
            return tagged[0]

    if len(fields) == 1 and not is_blank(fields[0]):
        return LineShape.SINGLE

    return LineShape.OTHER
