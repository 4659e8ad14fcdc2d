from typing import Optional

from token_renewal.models import CredentialKind, StorageMode
from token_renewal.store.base import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    STORAGE_TYPE = StorageMode.memory

    def __init__(self, storage: dict[str, str] | None = None) -> None:
        self._storage = storage if storage is not None else {}

    async def _read(self, kind: CredentialKind) -> Optional[str]:
        return self._storage.get(kind.value)

    async def _write(self, kind: CredentialKind, credential: str) -> None:
        self._storage[kind.value] = credential

    async def _delete(self, kind: CredentialKind) -> None:
        self._storage.pop(kind.value, None)
