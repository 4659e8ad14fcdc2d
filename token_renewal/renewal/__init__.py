from token_renewal.renewal.extractors import (
    access_token_extractor,
    json_field_extractor,
    refresh_token_extractor,
)
from token_renewal.renewal.policy import (
    CredentialExtractor,
    RenewalHandler,
    RenewalPolicy,
)
from token_renewal.renewal.single_flight import SingleFlight

__all__ = [
    "RenewalPolicy",
    "RenewalHandler",
    "CredentialExtractor",
    "SingleFlight",
    "json_field_extractor",
    "access_token_extractor",
    "refresh_token_extractor",
]
