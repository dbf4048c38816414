import re
from typing import Tuple

_SEAT_LABEL = re.compile(r"^\s*([A-Za-z]+)\s*(\d+)\s*$")


def parse_seat_label(label: str) -> Tuple[str, int]:
    """Split a seat label like 'B7' or 'a10' into ('B', 7)."""
    match = _SEAT_LABEL.match(label or "")
    if not match:
        raise ValueError(f"Invalid seat label '{label}'")
    return match.group(1).upper(), int(match.group(2))


def seat_label(row: str, number: int) -> str:
    return f"{row}{number}"
