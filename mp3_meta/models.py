from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from .core.synchsafe import decode_synchsafe
from .errors import Mp3MetaError
from .meta_keys import FRAME_HEADER_SIZE, ID3V2_HEADER_SIZE


class TagFormat(str, Enum):
    ID3V2 = "id3v2"
    ID3V1 = "id3v1"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class MetadataRecord:
    title: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.artist or self.album or self.year)

    def to_record(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TagHeader:
    identifier: bytes
    major_version: int
    minor_version: int
    flags: int
    size: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "TagHeader":
        if len(data) != ID3V2_HEADER_SIZE:
            raise ValueError(f"ID3v2 header is {ID3V2_HEADER_SIZE} bytes, got {len(data)}")
        return cls(
            identifier=data[0:3],
            major_version=data[3],
            minor_version=data[4],
            flags=data[5],
            size=decode_synchsafe(data[6:10]),
        )


@dataclass(frozen=True, slots=True)
class FrameHeader:
    frame_id: str
    size: int
    flags: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "FrameHeader":
        if len(data) != FRAME_HEADER_SIZE:
            raise ValueError(f"frame header is {FRAME_HEADER_SIZE} bytes, got {len(data)}")
        return cls(
            frame_id=data[0:4].decode("latin-1"),
            size=decode_synchsafe(data[4:8]),
            flags=data[8:10],
        )


@dataclass(frozen=True, slots=True)
class ReadResult:
    """Outcome of one read: either a record or the error that stopped it."""

    record: Optional[MetadataRecord] = None
    error: Optional[Mp3MetaError] = None
    tag_format: TagFormat = TagFormat.NONE
    path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.error is None
