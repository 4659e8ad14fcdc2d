from typing import Literal

from token_renewal.exceptions import messages
from token_renewal.exceptions.base import TokenRenewalError
from token_renewal.models import CredentialKind

StoreOperation = Literal["get", "save", "clear", "clear_all"]

_MESSAGES: dict[tuple[StoreOperation, CredentialKind | None], str] = {
    ("get", CredentialKind.ACCESS): messages.FAILED_TO_GET_ACCESS_TOKEN,
    ("save", CredentialKind.ACCESS): messages.FAILED_TO_SAVE_ACCESS_TOKEN,
    ("clear", CredentialKind.ACCESS): messages.FAILED_TO_CLEAR_ACCESS_TOKEN,
    ("get", CredentialKind.REFRESH): messages.FAILED_TO_GET_REFRESH_TOKEN,
    ("save", CredentialKind.REFRESH): messages.FAILED_TO_SAVE_REFRESH_TOKEN,
    ("clear", CredentialKind.REFRESH): messages.FAILED_TO_CLEAR_REFRESH_TOKEN,
    ("clear_all", None): messages.FAILED_TO_CLEAR_TOKENS,
}


class StoreError(TokenRenewalError):
    """Raised when the underlying credential storage medium fails.

    Carries the failing operation, the credential kind it targeted (None for
    ``clear_all``) and the original exception.
    """

    def __init__(
        self,
        operation: StoreOperation,
        kind: CredentialKind | None,
        cause: BaseException,
    ) -> None:
        self.operation = operation
        self.kind = kind
        self.cause = cause
        base_message = _MESSAGES.get((operation, kind), f"Store {operation} failed")
        super().__init__(f"{base_message}: {type(cause).__name__}: {cause}")
