"""
ID3v2 tag reader.

The tag header declares the size of the tag body as a synchsafe integer.
Frames are read one after another until the running byte count reaches
that size; only the text frames listed in ``FRAME_FIELDS`` are decoded.

In strict mode declared sizes are checked against the tag body and the
source length before anything is read. With ``strict=False`` sizes are
trusted, as in the classic reader: a short frame header ends the walk and
a short payload is decoded as far as it goes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import BinaryIO, Dict, Tuple

from .core.text import decode_text_frame
from .errors import FrameOverrun, ReadError, TruncatedTag
from .meta_keys import ALBUM, ARTIST, FRAME_HEADER_SIZE, ID3V2_HEADER_SIZE, TITLE, YEAR
from .models import FrameHeader, MetadataRecord, TagHeader

logger = logging.getLogger(__name__)

FRAME_FIELDS: Dict[str, str] = {
    TITLE: "title",
    ARTIST: "artist",
    ALBUM: "album",
    YEAR: "year",
}


def read_tag_header(stream: BinaryIO) -> TagHeader:
    stream.seek(0)
    data = stream.read(ID3V2_HEADER_SIZE)
    if len(data) < ID3V2_HEADER_SIZE:
        raise ReadError(
            f"Source is {len(data)} bytes; an ID3v2 header needs {ID3V2_HEADER_SIZE}."
        )
    return TagHeader.from_bytes(data)


def _remaining(stream: BinaryIO) -> int:
    here = stream.tell()
    end = stream.seek(0, os.SEEK_END)
    stream.seek(here)
    return end - here


def iter_frames(
    stream: BinaryIO, header: TagHeader, *, strict: bool = True
) -> Iterator[Tuple[FrameHeader, bytes]]:
    """
    Yield ``(frame header, payload)`` pairs for the tag described by ``header``.

    The stream must be positioned just after the 10-byte tag header.
    Zero-sized frames (including padding) are yielded with an empty payload.
    """
    tag_size = header.size
    if strict:
        available = _remaining(stream)
        if tag_size > available:
            raise TruncatedTag(
                f"Tag declares {tag_size} bytes but only {available} follow the header."
            )

    # Counts the tag header too, while tag_size does not.
    consumed = ID3V2_HEADER_SIZE
    while consumed < tag_size:
        raw = stream.read(FRAME_HEADER_SIZE)
        if len(raw) < FRAME_HEADER_SIZE:
            if strict:
                raise TruncatedTag(f"Frame header cut short at tag offset {consumed}.")
            logger.warning("Frame header cut short at tag offset %d; stopping", consumed)
            return
        frame = FrameHeader.from_bytes(raw)
        consumed += FRAME_HEADER_SIZE + frame.size

        body_end = consumed - ID3V2_HEADER_SIZE
        if body_end > tag_size:
            if strict:
                raise FrameOverrun(
                    f"Frame {frame.frame_id!r} ends at {body_end}, past the {tag_size}-byte tag."
                )
            logger.warning(
                "Frame %r ends at %d, past the %d-byte tag; reading anyway",
                frame.frame_id,
                body_end,
                tag_size,
            )

        payload = b""
        if frame.size > 0:
            payload = stream.read(frame.size)
            if len(payload) < frame.size:
                if strict:
                    raise TruncatedTag(
                        f"Frame {frame.frame_id!r} declares {frame.size} bytes, got {len(payload)}."
                    )
                logger.warning(
                    "Frame %r declares %d bytes, got %d",
                    frame.frame_id,
                    frame.size,
                    len(payload),
                )
        yield frame, payload


def read_id3v2(stream: BinaryIO, *, strict: bool = True) -> MetadataRecord:
    header = read_tag_header(stream)
    logger.debug(
        "ID3v2.%d.%d tag, %d bytes, flags 0x%02x",
        header.major_version,
        header.minor_version,
        header.size,
        header.flags,
    )
    fields: Dict[str, str] = {}
    for frame, payload in iter_frames(stream, header, strict=strict):
        if frame.size == 0:
            continue
        name = FRAME_FIELDS.get(frame.frame_id)
        if name is None:
            logger.debug("Skipping frame %r (%d bytes)", frame.frame_id, frame.size)
            continue
        # Later frames win over earlier ones with the same ID.
        fields[name] = decode_text_frame(payload)
    return MetadataRecord(**fields)
