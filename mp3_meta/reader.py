"""
Public entry points.

``read_metadata`` raises on failure; ``try_read_metadata`` returns a
``ReadResult`` carrying either the record or the error (with its
``ErrorKind``), for callers that would rather branch than catch.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from .config import ReaderSettings
from .detect import detect_tag_format
from .errors import FileNotFound, Mp3MetaError, OpenError
from .id3v1 import read_id3v1
from .id3v2 import read_id3v2
from .models import MetadataRecord, ReadResult, TagFormat

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, BinaryIO]


def _is_path(source: Source) -> bool:
    return isinstance(source, (str, os.PathLike))


def _open(path: Union[str, os.PathLike]) -> BinaryIO:
    try:
        return open(path, "rb")
    except FileNotFoundError as exc:
        raise FileNotFound(f"Could not open file: {path}") from exc
    except OSError as exc:
        raise OpenError(f"Could not open file: {path}") from exc


def _read_stream(
    stream: BinaryIO, settings: ReaderSettings
) -> Tuple[TagFormat, MetadataRecord]:
    tag_format = detect_tag_format(stream)
    logger.debug("Detected %s tag in %s", tag_format.value, getattr(stream, "name", stream))
    if tag_format is TagFormat.ID3V2:
        stream.seek(0)
        return tag_format, read_id3v2(stream, strict=settings.strict)
    return tag_format, read_id3v1(stream, trim=settings.trim_id3v1)


def _read(source: Source, settings: Optional[ReaderSettings]) -> Tuple[TagFormat, MetadataRecord]:
    settings = settings or ReaderSettings()
    if _is_path(source):
        with _open(source) as stream:
            return _read_stream(stream, settings)
    # Streams passed in by the caller stay open.
    return _read_stream(source, settings)


def read_metadata(source: Source, settings: Optional[ReaderSettings] = None) -> MetadataRecord:
    """
    Read title/artist/album/year from an MP3 path or open binary stream.

    An ``ID3`` prefix selects the ID3v2 reader, even when the file also ends
    in an ID3v1 block; everything else goes to the ID3v1 reader. Errors from
    either reader propagate unchanged.
    """
    _, record = _read(source, settings)
    return record


def try_read_metadata(source: Source, settings: Optional[ReaderSettings] = None) -> ReadResult:
    path = Path(source) if _is_path(source) else None
    try:
        tag_format, record = _read(source, settings)
    except Mp3MetaError as exc:
        logger.debug("No metadata for %s: %s (%s)", path or source, exc, exc.kind.value)
        return ReadResult(error=exc, path=path)
    return ReadResult(record=record, tag_format=tag_format, path=path)
