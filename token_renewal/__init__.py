from .client import TokenRenewalAsyncClient
from .config.settings import RenewalConfig, RenewalSettings
from .models import CredentialKind, CredentialPair
from .renewal.extractors import json_field_extractor
from .renewal.policy import RenewalPolicy
from .store import CredentialStore, DiskCredentialStore, InMemoryCredentialStore
from .transport import RenewalTransport
from .version import __version__

__all__ = [
    "TokenRenewalAsyncClient",
    "RenewalTransport",
    "RenewalPolicy",
    "RenewalConfig",
    "RenewalSettings",
    "CredentialKind",
    "CredentialPair",
    "CredentialStore",
    "InMemoryCredentialStore",
    "DiskCredentialStore",
    "json_field_extractor",
    "__version__",
]
