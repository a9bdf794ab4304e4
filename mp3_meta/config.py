from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class ReaderSettings(BaseModel):
    strict: bool = True
    trim_id3v1: bool = False


class LibrarySettings(BaseModel):
    roots: List[Path]
    include_extensions: List[str] = Field(default_factory=lambda: [".mp3"])
    exclude_patterns: List[str] = Field(default_factory=list)

    @field_validator("roots", mode="before")
    @classmethod
    def _expand_roots(cls, values: List[str]) -> List[Path]:
        return [Path(v).expanduser().resolve() for v in values]

    @field_validator("include_extensions")
    @classmethod
    def _normalize_exts(cls, values: List[str]) -> List[str]:
        return [v.lower() if v.startswith(".") else f".{v.lower()}" for v in values]


class Settings(BaseModel):
    reader: ReaderSettings = ReaderSettings()
    library: Optional[LibrarySettings] = None

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "mp3-meta.yaml", cwd / "mp3-meta.yml"):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find mp3-meta.yaml - pass the path explicitly.")
