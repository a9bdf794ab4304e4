"""
Core decoding layer for mp3-meta.

This package contains pure byte-level functions with no I/O.
Everything here operates on ``bytes`` already read by a reader module.
"""

from __future__ import annotations

from .synchsafe import MAX_SYNCHSAFE, decode_synchsafe, encode_synchsafe
from .text import TEXT_DECODERS, decode_text_frame

__all__ = [
    "MAX_SYNCHSAFE",
    "TEXT_DECODERS",
    "decode_synchsafe",
    "decode_text_frame",
    "encode_synchsafe",
]
