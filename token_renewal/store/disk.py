import os
import tempfile
from pathlib import Path
from typing import Optional

from token_renewal.models import CredentialKind, StorageMode
from token_renewal.store.base import CredentialStore

DEFAULT_STORAGE_DIR = ".token_renewal"
FILE_MODE = 0o600


class DiskCredentialStore(CredentialStore):
    """Keeps each credential in its own file under ``storage_dir``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash mid-write never leaves a truncated credential.
    """

    STORAGE_TYPE = StorageMode.disk

    def __init__(self, storage_dir: str | None = None) -> None:
        if storage_dir is None:
            storage_dir = DEFAULT_STORAGE_DIR
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)

    def _get_path(self, kind: CredentialKind) -> Path:
        return self._storage_dir / kind.value

    async def _read(self, kind: CredentialKind) -> Optional[str]:
        path = self._get_path(kind)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    async def _write(self, kind: CredentialKind, credential: str) -> None:
        path = self._get_path(kind)
        fd, tmp_path = tempfile.mkstemp(
            dir=self._storage_dir, prefix=f".{kind.value}."
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(credential)
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    async def _delete(self, kind: CredentialKind) -> None:
        self._get_path(kind).unlink(missing_ok=True)
