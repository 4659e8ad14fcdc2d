import httpx

from token_renewal.exceptions import messages
from token_renewal.exceptions.base import TokenRenewalError
from token_renewal.exceptions.store import StoreError


class RenewalError(TokenRenewalError):
    pass


class MissingRefreshCredentialError(RenewalError):
    def __init__(self) -> None:
        super().__init__(messages.REFRESH_TOKEN_IS_MISSING)


class AccessExtractionFailedError(RenewalError):
    def __init__(self) -> None:
        super().__init__(messages.FAILED_TO_EXTRACT_ACCESS_TOKEN)


class RenewalRejectedError(RenewalError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"{messages.RENEWAL_REJECTED} with status code {status_code}")


class CredentialRetrievalError(TokenRenewalError):
    """The access credential could not be read, so the request was not sent."""

    def __init__(self, cause: StoreError) -> None:
        self.cause = cause
        super().__init__(f"{messages.FAILED_TO_GET_ACCESS_TOKEN}: {cause}")


class RenewalFailedError(TokenRenewalError):
    """Terminal renewal failure.

    Raised after the stored credentials were purged. ``original_error`` is the
    status error of the request that triggered renewal and ``renewal_cause``
    the failure that ended the renewal sequence. ``clear_error`` holds the
    store failure if purging the credentials failed as well.
    """

    def __init__(
        self,
        original_error: httpx.HTTPStatusError,
        renewal_cause: BaseException,
        clear_error: StoreError | None = None,
    ) -> None:
        self.original_error = original_error
        self.renewal_cause = renewal_cause
        self.clear_error = clear_error
        super().__init__(
            f"{messages.FAILED_TO_REFRESH_ACCESS_TOKEN}: {renewal_cause}"
        )

    @property
    def response(self) -> httpx.Response:
        return self.original_error.response

    @property
    def request(self) -> httpx.Request:
        return self.original_error.request
