from __future__ import annotations

import logging
import os
from typing import BinaryIO, Dict, Tuple

from .errors import ReadError, TagNotFound
from .meta_keys import ID3V1_BLOCK_SIZE, ID3V1_MARKER
from .models import MetadataRecord

logger = logging.getLogger(__name__)

# Offsets inside the trailing 128-byte block.
ID3V1_FIELDS: Dict[str, Tuple[int, int]] = {
    "title": (3, 33),
    "artist": (33, 63),
    "album": (63, 93),
    "year": (93, 97),
}


def read_id3v1(stream: BinaryIO, *, trim: bool = False) -> MetadataRecord:
    """
    Read the fixed-width fields of the ID3v1 block at the end of ``stream``.

    Fields keep their NUL/space padding unless ``trim`` is set.
    """
    size = stream.seek(0, os.SEEK_END)
    if size < ID3V1_BLOCK_SIZE:
        raise ReadError(
            f"Source is {size} bytes; an ID3v1 block needs {ID3V1_BLOCK_SIZE}."
        )
    stream.seek(size - ID3V1_BLOCK_SIZE)
    block = stream.read(ID3V1_BLOCK_SIZE)
    if len(block) != ID3V1_BLOCK_SIZE:
        raise ReadError(f"Short read: got {len(block)} of {ID3V1_BLOCK_SIZE} bytes.")
    if block[: len(ID3V1_MARKER)] != ID3V1_MARKER:
        raise TagNotFound("No ID3v1 tag found in file.")

    fields = {
        name: block[start:end].decode("latin-1")
        for name, (start, end) in ID3V1_FIELDS.items()
    }
    if trim:
        fields = {name: value.rstrip("\x00 ") for name, value in fields.items()}
    logger.debug("ID3v1 tag: %s", fields)
    return MetadataRecord(**fields)
