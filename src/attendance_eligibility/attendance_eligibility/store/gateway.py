from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceCorrupt, PersistenceWriteFailed
from .codec import store_from_dict, store_to_dict
from .model import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    store: Store
    warning: Optional[PersistenceCorrupt] = None


class StoreGateway:
    """Loads and saves the whole Store as one JSON file.

    A corrupt file is never deleted or overwritten by `load`; the caller gets
    an empty Store plus the warning and decides what to show.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        if not self._path.exists():
            logger.info("No store file at %s, starting empty", self._path)
            return LoadResult(store=Store())

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            store = store_from_dict(data)
        except PersistenceCorrupt as e:
            return self._corrupt(e)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError, MemoryError) as e:
            return self._corrupt(PersistenceCorrupt(str(e)))

        logger.info(
            "Loaded store from %s (students=%d, holidays=%d, medicals=%d)",
            self._path,
            len(store.students),
            len(store.holidays),
            len(store.medicals),
        )
        return LoadResult(store=store)

    def _corrupt(self, error: PersistenceCorrupt) -> LoadResult:
        warning = PersistenceCorrupt(
            f"Saved data file {self._path} was corrupted and will be ignored. "
            f"Delete it if needed. ({error})"
        )
        logger.warning("%s", warning)
        return LoadResult(store=Store(), warning=warning)

    def save(self, store: Store) -> None:
        payload = store_to_dict(store)
        directory = self._path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            if self._path.exists():
                os.chmod(tmp_name, stat.S_IMODE(os.stat(self._path).st_mode))
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error("Save to %s failed: %s", self._path, e)
            raise PersistenceWriteFailed(f"Save failed: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

        logger.info("Saved store to %s", self._path)
