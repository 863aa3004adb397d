"""
Local JSON cache for validated model listings.

Purpose
-------
Persist the last successfully fetched listing as a single pretty-printed
``{"data": [...]}`` document and report how old it is.

Age semantics
-------------
Age is derived from the file's modification time, never from a field inside
the document. The clock may move between a write and a later read, so an
mtime in the future is reported as age ``0``.

Failure modes
-------------
- ``read``/``age_seconds`` raise :class:`CacheMissError` when the file (or its
  directory) is absent.
- ``read`` raises :class:`CacheCorruptError` when the file cannot be read, is
  not JSON, or fails validation (the cause is kept in ``raw``).
- ``write`` lets ``OSError`` propagate (permissions, full disk); the caller
  decides whether that is fatal.

Concurrency
-----------
No locking: concurrent writers race and the last ``os.replace`` wins. Each
write goes through a temporary sibling file so readers never see a partially
written document.
"""

from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..base.dto import ModelRecord, ModelsListing
from ..base.errors import CacheCorruptError, CacheMissError, StructuralValidationError
from .validation import validate_listing


@dataclass(frozen=True)
class CachedBatch:
    """Records read from the cache together with the cache age in seconds."""

    records: List[ModelRecord]
    age_seconds: float


class CacheStore:
    """File-backed store for one listing document at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def age_seconds(self, now: Optional[float] = None) -> float:
        """Return seconds elapsed since the cache file was last written."""
        try:
            mtime = self.path.stat().st_mtime
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise CacheMissError(raw=exc, path=str(self.path)) from exc
        except OSError as exc:
            raise CacheCorruptError(message=f"cache file unreadable: {exc}", raw=exc, path=str(self.path)) from exc
        current = time.time() if now is None else now
        return max(0.0, current - mtime)

    def read(self, now: Optional[float] = None) -> CachedBatch:
        """Load and validate the cached listing.

        Returns
        -------
        CachedBatch
            Validated records and the age of the file.
        """
        age = self.age_seconds(now)
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CacheMissError(raw=exc, path=str(self.path)) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheCorruptError(message=f"cache file unreadable: {exc}", raw=exc, path=str(self.path)) from exc
        try:
            records = validate_listing(json.loads(text))
        except ValueError as exc:
            raise CacheCorruptError(message=f"cache file is not valid JSON: {exc}", raw=exc, path=str(self.path)) from exc
        except StructuralValidationError as exc:
            raise CacheCorruptError(message=f"cache file failed validation: {exc.message}", raw=exc, path=str(self.path)) from exc
        return CachedBatch(records=records, age_seconds=age)

    def write(self, records: Sequence[ModelRecord]) -> None:
        """Persist ``records`` as a pretty-printed listing document.

        Missing parent directories are created. The document is written to a
        temporary sibling file first and then moved over the target.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = ModelsListing.from_records(list(records)).to_dict()
        tmp_path = self.path.with_name(f"{self.path.name}.{os.getpid()}.tmp")
        try:
            tmp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["CacheStore", "CachedBatch"]
