"""Room codes and the seeds derived from them.

A room code carries no live state between players. Everyone who enters the
same topic and code asks the challenge source for the same seed, which is
what makes their challenge sets (very likely) identical.
"""

import random
import string
from typing import Optional

ROOM_CODE_ALPHABET = string.digits + string.ascii_uppercase
ROOM_CODE_LENGTH = 5


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def _utf16_units(text: str) -> list[int]:
    """Return the UTF-16 code units of text."""
    data = text.encode("utf-16-le")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def derive_seed(text: str) -> int:
    """Hash a string to a deterministic non-negative seed.

    Polynomial rolling hash with multiplier 31 over UTF-16 code units,
    wrapped to 32 bits at every step, then made non-negative.

    Args:
        text: Usually a normalized room code

    Returns:
        Seed in the range ``[0, 2**31]``
    """
    acc = 0
    for unit in _utf16_units(text):
        acc = _to_int32(acc * 31 + unit)
    return abs(acc)


def normalize_room_code(code: str) -> str:
    """Trim and uppercase a room code."""
    return code.strip().upper()


def seed_for_room(code: str) -> int:
    """Derive the generation seed for a room code.

    Raises:
        ValueError: If the code is blank
    """
    normalized = normalize_room_code(code)
    if not normalized:
        raise ValueError("Room code must not be blank")
    return derive_seed(normalized)


def generate_room_code(
    length: int = ROOM_CODE_LENGTH,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate a fresh room code for a host.

    Args:
        length: Number of characters
        rng: Random source, mainly for tests
    """
    rng = rng or random.Random()
    return "".join(rng.choice(ROOM_CODE_ALPHABET) for _ in range(length))
