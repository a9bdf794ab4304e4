from __future__ import annotations

from typing import BinaryIO

from .meta_keys import ID3V2_MARKER
from .models import TagFormat


def detect_tag_format(stream: BinaryIO) -> TagFormat:
    """
    Classify which tag governs the source.

    Reads the first three bytes, so the stream is left at offset 3 (or
    earlier for very short sources); callers re-seek before parsing.
    Anything that does not start with ``ID3`` falls back to ID3v1.
    """
    stream.seek(0)
    marker = stream.read(len(ID3V2_MARKER))
    if marker == ID3V2_MARKER:
        return TagFormat.ID3V2
    return TagFormat.ID3V1
