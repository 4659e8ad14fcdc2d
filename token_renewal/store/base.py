from abc import ABC, abstractmethod
from typing import Optional

from token_renewal.exceptions.store import StoreError
from token_renewal.log.sensitive import sensitive_log_filter
from token_renewal.models import CredentialKind, CredentialPair, StorageMode


class CredentialStore(ABC):
    """Base class for credential stores holding the access and refresh credentials.

    Backends implement the raw ``_read``/``_write``/``_delete`` primitives. Every
    failure of those primitives is surfaced as a ``StoreError``. Nothing is
    retried at this layer. Every credential read or written is registered with
    the sensitive log filter so it never appears in log output.
    """

    STORAGE_TYPE: StorageMode

    @abstractmethod
    async def _read(self, kind: CredentialKind) -> Optional[str]:
        pass

    @abstractmethod
    async def _write(self, kind: CredentialKind, credential: str) -> None:
        pass

    @abstractmethod
    async def _delete(self, kind: CredentialKind) -> None:
        pass

    async def get(self, kind: CredentialKind) -> Optional[str]:
        try:
            credential = await self._read(kind)
        except Exception as e:
            raise StoreError("get", kind, e) from e
        if credential is not None:
            sensitive_log_filter.hide_sensitive_strings(credential)
        return credential

    async def save(self, kind: CredentialKind, credential: str) -> None:
        sensitive_log_filter.hide_sensitive_strings(credential)
        try:
            await self._write(kind, credential)
        except Exception as e:
            raise StoreError("save", kind, e) from e

    async def clear(self, kind: CredentialKind) -> None:
        try:
            await self._delete(kind)
        except Exception as e:
            raise StoreError("clear", kind, e) from e

    async def clear_all(self) -> None:
        """Clear both credentials.

        Both kinds are always attempted. If either fails, a single
        ``StoreError`` for ``clear_all`` is raised with the first failure as cause.
        """
        errors: list[StoreError] = []
        for kind in CredentialKind:
            try:
                await self.clear(kind)
            except StoreError as e:
                errors.append(e)
        if errors:
            raise StoreError("clear_all", None, errors[0]) from errors[0]

    async def load_pair(self) -> CredentialPair:
        return CredentialPair(
            access=await self.get(CredentialKind.ACCESS),
            refresh=await self.get(CredentialKind.REFRESH),
        )
