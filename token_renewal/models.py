from dataclasses import dataclass
from enum import Enum


class CredentialKind(Enum):
    ACCESS = "access_token"
    REFRESH = "refresh_token"


class StorageMode(Enum):
    memory = "memory"
    disk = "disk"


@dataclass(frozen=True)
class CredentialPair:
    access: str | None = None
    refresh: str | None = None

    @property
    def is_authorized(self) -> bool:
        return self.access is not None
