import re
from dataclasses import dataclass
from typing import Generic, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    """
    Expected failure carried as a value.

    `reason` is human readable only; nothing branches on it.
    """
    reason: str


Result = Union[Ok[T], Err]


# Signed 32-bit bounds, same as the timestamps/severities the format was
# designed around.
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# Decimal digits of any script; int() alone would also accept
# surrounding whitespace and underscores.
INT_RE = re.compile(r"[+-]?\d+")


def parse_int_safe(text: str) -> Result[int]:
    """
    Parse a decimal integer without raising.

      "147"   -> Ok(147)
      "-3"    -> Ok(-3)
      " 147"  -> Err
      "abc"   -> Err
    """
    if not INT_RE.fullmatch(text):
        return Err(f'For input string: "{text}"')

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return Err(f'Out of range: "{text}"')

    return Ok(value)
