"""UUID v7 generation and inspection (time-ordered).

Implements RFC 9562 UUID v7: unix_ts_ms + random.
Scrawled primary keys use v7 so rows sort by creation time in
B-tree indexes, which random v4 keys do not.

Ordering holds across milliseconds only. Two values minted in the
same millisecond are ordered by their random bits.
"""

from __future__ import annotations

import os
import re
import time
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

_UUID7_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def uuid7(
    clock: Optional[Callable[[], float]] = None,
    randbytes: Optional[Callable[[int], bytes]] = None,
) -> str:
    """Generate a UUID v7 string.

    Format: 48-bit unix_ts_ms | 4-bit version(7) | 12-bit rand_a
            | 2-bit variant | 62-bit rand_b

    Args:
        clock: returns seconds since the epoch. Defaults to time.time.
        randbytes: returns n secure random bytes. Defaults to os.urandom.
    """
    clock = clock or time.time
    randbytes = randbytes or os.urandom

    timestamp_ms = int(clock() * 1000) & 0xFFFFFFFFFFFF

    uuid_bytes = bytearray(16)
    uuid_bytes[0:6] = timestamp_ms.to_bytes(6, byteorder="big")
    uuid_bytes[6:16] = randbytes(10)

    # Version (bits 48-51 = 0111)
    uuid_bytes[6] = (uuid_bytes[6] & 0x0F) | 0x70

    # Variant (bits 64-65 = 10)
    uuid_bytes[8] = (uuid_bytes[8] & 0x3F) | 0x80

    return str(uuid.UUID(bytes=bytes(uuid_bytes)))


def is_uuid7(value: object) -> bool:
    """True if value is a canonical hyphenated v7 UUID string."""
    return isinstance(value, str) and bool(_UUID7_PATTERN.fullmatch(value))


def uuid7_timestamp_ms(value: str) -> int:
    """Decode the millisecond timestamp embedded in a v7 UUID.

    Raises ValueError unless value is a canonical hyphenated v7 UUID.
    urn:uuid:, braced and unhyphenated forms are rejected.
    """
    if not is_uuid7(value):
        raise ValueError(f"Not a canonical version 7 UUID: {value!r}")
    return int(value.replace("-", ""), 16) >> 80


def uuid7_datetime(value: str) -> datetime:
    """Same as uuid7_timestamp_ms, as an aware UTC datetime."""
    return datetime.fromtimestamp(
        uuid7_timestamp_ms(value) / 1000, tz=timezone.utc
    )
