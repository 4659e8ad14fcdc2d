from token_renewal.store.base import CredentialStore
from token_renewal.store.disk import DiskCredentialStore
from token_renewal.store.memory import InMemoryCredentialStore
from token_renewal.store.factory import create_store

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
    "DiskCredentialStore",
    "create_store",
]
