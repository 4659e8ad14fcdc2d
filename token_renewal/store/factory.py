from loguru import logger

from token_renewal.config.settings import RenewalSettings
from token_renewal.models import StorageMode
from token_renewal.store.base import CredentialStore
from token_renewal.store.disk import DiskCredentialStore
from token_renewal.store.memory import InMemoryCredentialStore


def create_store(settings: RenewalSettings) -> CredentialStore:
    logger.info(f"Using {settings.storage_mode.value} credential store")
    if settings.storage_mode == StorageMode.disk:
        return DiskCredentialStore(settings.storage_dir)
    return InMemoryCredentialStore()
