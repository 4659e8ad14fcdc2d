from token_renewal.exceptions.base import TokenRenewalError
from token_renewal.exceptions.renewal import (
    AccessExtractionFailedError,
    CredentialRetrievalError,
    MissingRefreshCredentialError,
    RenewalError,
    RenewalFailedError,
    RenewalRejectedError,
)
from token_renewal.exceptions.store import StoreError

__all__ = [
    "TokenRenewalError",
    "StoreError",
    "RenewalError",
    "MissingRefreshCredentialError",
    "AccessExtractionFailedError",
    "RenewalRejectedError",
    "CredentialRetrievalError",
    "RenewalFailedError",
]
