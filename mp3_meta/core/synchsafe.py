"""
Synchsafe integer codec.

ID3v2 stores sizes as four bytes carrying 7 bits each, big-endian, so the
encoded value never contains an MPEG sync pattern. The high bit of every
byte is ignored on decode and is not validated.
"""

from __future__ import annotations

MAX_SYNCHSAFE = (1 << 28) - 1


def decode_synchsafe(data: bytes) -> int:
    if len(data) != 4:
        raise ValueError(f"synchsafe integers are 4 bytes, got {len(data)}")
    return (
        ((data[0] & 0x7F) << 21)
        | ((data[1] & 0x7F) << 14)
        | ((data[2] & 0x7F) << 7)
        | (data[3] & 0x7F)
    )


def encode_synchsafe(value: int) -> bytes:
    """Inverse of :func:`decode_synchsafe` for values in ``[0, 2**28 - 1]``."""
    if not 0 <= value <= MAX_SYNCHSAFE:
        raise ValueError(f"{value} does not fit in 28 bits")
    return bytes(
        [
            (value >> 21) & 0x7F,
            (value >> 14) & 0x7F,
            (value >> 7) & 0x7F,
            value & 0x7F,
        ]
    )
