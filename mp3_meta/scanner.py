from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from .config import LibrarySettings, ReaderSettings
from .models import ReadResult
from .reader import try_read_metadata

logger = logging.getLogger(__name__)


class LibraryScanner:
    """Walks the configured roots and reads tag metadata for every matching file."""

    def __init__(self, settings: LibrarySettings, reader: Optional[ReaderSettings] = None) -> None:
        self.settings = settings
        self.reader = reader or ReaderSettings()
        self._exts = {ext.lower() for ext in self.settings.include_extensions}

    def iter_files(self) -> Iterator[Path]:
        for root in self.settings.roots:
            if not root.exists():
                logger.debug("Skipping missing root %s", root)
                continue
            for file_path in sorted(root.rglob("*")):
                if not file_path.is_file():
                    continue
                if not self._should_include(file_path):
                    continue
                yield file_path

    def _should_include(self, path: Path) -> bool:
        if path.suffix.lower() not in self._exts:
            return False
        rel = str(path)
        for pattern in self.settings.exclude_patterns:
            if fnmatch.fnmatch(rel, pattern):
                return False
        return True

    def iter_metadata(self) -> Iterator[ReadResult]:
        for file_path in self.iter_files():
            yield try_read_metadata(file_path, self.reader)
