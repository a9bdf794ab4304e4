"""
Text frame payload decoding.

A text frame payload is ``[encoding marker][text bytes...]``. Only two
markers are interpreted:

- ``0``: single-byte text, returned byte-for-byte (Latin-1 mapping).
- ``1``: two-byte code units; only the second byte of each pair is kept.
  This handles ASCII stored as big-endian UTF-16 and nothing else: other
  code points and byte-order marks come out mangled, and a trailing odd
  byte is dropped.

Any other marker falls back to returning the bytes as single-byte text.
Supporting another encoding means adding an entry to ``TEXT_DECODERS``.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..meta_keys import ENCODING_DOUBLE_BYTE, ENCODING_SINGLE_BYTE


def _decode_single_byte(data: bytes) -> str:
    return data.decode("latin-1")


def _decode_double_byte(data: bytes) -> str:
    # data[1::2] stops at the last complete pair
    return data[1::2].decode("latin-1")


TEXT_DECODERS: Dict[int, Callable[[bytes], str]] = {
    ENCODING_SINGLE_BYTE: _decode_single_byte,
    ENCODING_DOUBLE_BYTE: _decode_double_byte,
}


def decode_text_frame(payload: bytes) -> str:
    if not payload:
        return ""
    decoder = TEXT_DECODERS.get(payload[0], _decode_single_byte)
    return decoder(payload[1:])
