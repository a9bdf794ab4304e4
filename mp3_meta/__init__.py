"MP3 tag metadata reader package."

from importlib import metadata

from .errors import (
    ErrorKind,
    FileNotFound,
    FrameOverrun,
    Mp3MetaError,
    OpenError,
    ReadError,
    TagNotFound,
    TruncatedTag,
)
from .models import MetadataRecord, ReadResult, TagFormat
from .reader import read_metadata, try_read_metadata

__all__ = [
    "ErrorKind",
    "FileNotFound",
    "FrameOverrun",
    "MetadataRecord",
    "Mp3MetaError",
    "OpenError",
    "ReadError",
    "ReadResult",
    "TagFormat",
    "TagNotFound",
    "TruncatedTag",
    "__version__",
    "read_metadata",
    "try_read_metadata",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("mp3-meta")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
