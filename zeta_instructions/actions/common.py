from __future__ import annotations
import typing
from ..errors import InvalidInput

U8_MAX = 2**8 - 1
U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


def check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= upper:
        raise InvalidInput(f"{name} out of range: {value}")


def absent_if_zero(value: typing.Optional[int]) -> typing.Optional[int]:
    """Zero and None both mean the optional field is not set."""
    return None if not value else value
