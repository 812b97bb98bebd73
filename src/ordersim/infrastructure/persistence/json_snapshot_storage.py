"""JSON-file-backed implementation of SnapshotStorage.

Each key lives in its own ``<key>.json`` file.  Writes go to a temporary
file in the same directory which then replaces the target, so a crash
mid-write leaves either the old snapshot or the new one, never half of one.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from ordersim.domain.exceptions import PersistenceUnavailable
from ordersim.domain.repository.snapshot_storage import SnapshotStorage


class JsonSnapshotStorage(SnapshotStorage):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- SnapshotStorage interface --------------------------------------------

    def read(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceUnavailable(f"Cannot read {path}: {exc}") from exc

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            self._replace(path, value + "\n")
        except OSError as exc:
            raise PersistenceUnavailable(f"Cannot write {path}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def _replace(self, path: Path, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._directory, prefix=f".{path.stem}-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                os.chmod(tmp_name, _snapshot_mode(path))
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _snapshot_mode(path: Path) -> int:
    """Keep the mode of an existing snapshot, else what a plain open() would give."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
