"""Shipment code validation and batch partitioning helpers."""

import re
from collections.abc import Iterable, Iterator

_ORDER_CODE_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{9}[A-Z]{2}$")


def is_valid_order_code(code: object) -> bool:
    """Return True if code is a well-formed SRO shipment code.

    Two uppercase letters, nine digits, two uppercase letters
    (e.g. ``AB123456789BR``). Non-string input is never valid.
    """
    if not isinstance(code, str):
        return False
    # fullmatch rejects a trailing newline that ``$`` alone would accept
    return _ORDER_CODE_PATTERN.fullmatch(code) is not None


def flatten_codes(*codes: str | Iterable[str]) -> list[str]:
    """Flatten variadic and list/tuple inputs into one ordered list.

    ``flatten_codes("A", ["B", "C"])`` -> ``["A", "B", "C"]``. Duplicates
    are kept; strings are never split into characters.
    """
    flat: list[str] = []
    for item in codes:
        if isinstance(item, str):
            flat.append(item)
        elif isinstance(item, Iterable):
            flat.extend(flatten_codes(*item))
        else:
            flat.append(item)
    return flat


def partition(codes: list[str], size: int) -> Iterator[list[str]]:
    """Yield consecutive groups of at most ``size`` codes."""
    if size < 1:
        raise ValueError(f"Group size must be positive, got {size}")
    for start in range(0, len(codes), size):
        yield codes[start:start + size]
