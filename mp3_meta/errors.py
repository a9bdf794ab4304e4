from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    OPEN = "open"
    FILE_NOT_FOUND = "file_not_found"
    READ = "read"
    TAG_NOT_FOUND = "tag_not_found"
    TRUNCATED_TAG = "truncated_tag"
    FRAME_OVERRUN = "frame_overrun"


class Mp3MetaError(Exception):
    """Base class for every failure raised while reading tag metadata."""

    kind: ErrorKind = ErrorKind.READ


class OpenError(Mp3MetaError):
    """Raised when the source cannot be opened for reading."""

    kind = ErrorKind.OPEN


class FileNotFound(OpenError):
    kind = ErrorKind.FILE_NOT_FOUND


class ReadError(Mp3MetaError):
    """Raised when the source is shorter than the tag format requires."""

    kind = ErrorKind.READ


class TagNotFound(Mp3MetaError):
    """Raised when the ID3v1 ``TAG`` marker is missing from the last 128 bytes."""

    kind = ErrorKind.TAG_NOT_FOUND


class TruncatedTag(Mp3MetaError):
    """Raised when a declared tag or frame size runs past the available bytes."""

    kind = ErrorKind.TRUNCATED_TAG


class FrameOverrun(TruncatedTag):
    """Raised when a frame ends past the declared end of the tag body."""

    kind = ErrorKind.FRAME_OVERRUN
