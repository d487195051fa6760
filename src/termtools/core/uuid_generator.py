from __future__ import annotations

import os
import time
import uuid

from typing import Final

SUPPORTED_VERSIONS: Final[tuple[int, ...]] = (4, 7)
MAX_UUIDS: Final[int] = 100


def uuid_v4() -> str:
    """Return a random (version 4) UUID string."""
    return str(uuid.uuid4())


def uuid_v7() -> str:
    """
    Return a time-ordered (version 7) UUID string.

    Layout per RFC 9562: 48-bit Unix timestamp in milliseconds, 4-bit
    version, 12 random bits, 2-bit variant, 62 random bits.
    """
    timestamp_ms = time.time_ns() // 1_000_000
    rand = int.from_bytes(os.urandom(10), 'big')

    rand_a = rand >> 68
    rand_b = rand & ((1 << 62) - 1)

    value = (timestamp_ms & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= rand_a << 64
    value |= 0b10 << 62
    value |= rand_b
    return str(uuid.UUID(int=value))


def generate_uuids(version: int = 4, count: int = 1) -> list[str]:
    """
    Generate ``count`` UUIDs of the given version.

    Raises:
        ValueError: If the version is unsupported or count is outside
            [1, MAX_UUIDS].
    """
    if version not in SUPPORTED_VERSIONS:
        msg = f'Unsupported UUID version {version}; choose 4 or 7.'
        raise ValueError(msg)
    if not 1 <= count <= MAX_UUIDS:
        msg = f'UUID count must be between 1 and {MAX_UUIDS}, got {count}.'
        raise ValueError(msg)

    factory = uuid_v4 if version == 4 else uuid_v7
    return [factory() for _ in range(count)]
