import httpx
from loguru import logger

from token_renewal.exceptions.renewal import CredentialRetrievalError, RenewalFailedError
from token_renewal.exceptions.store import StoreError
from token_renewal.log.sensitive import mask_credential
from token_renewal.models import CredentialKind
from token_renewal.renewal.policy import RenewalPolicy
from token_renewal.store.base import CredentialStore


class RenewalTransport(httpx.AsyncBaseTransport):
    """
    A custom HTTP transport that authorizes requests with the stored access credential and renews it
    when the server reports it expired.

    Every request gets the authorization headers of the current access credential. When the response
    status is one of the policy's renew status codes, the credential is renewed and the same request is
    resubmitted once through the wrapped transport. The resubmitted response is returned as is, even when
    it is an error. When renewal fails, both stored credentials are cleared and ``RenewalFailedError``
    is raised.

    Args:
        wrapped_transport (httpx.AsyncBaseTransport): The underlying transport used for sending requests
            and for resubmitting them after renewal.
        store (CredentialStore): Where the access and refresh credentials live.
        policy (RenewalPolicy): Decides when to renew and how to project the credential into headers.
        renewal_client (httpx.AsyncClient, optional): Client handed to the renewal handler. Defaults to a
            client over ``wrapped_transport``, so renewal calls are never intercepted themselves.
    """

    def __init__(
        self,
        wrapped_transport: httpx.AsyncBaseTransport,
        store: CredentialStore,
        policy: RenewalPolicy,
        renewal_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self._store = store
        self._policy = policy
        self._owns_renewal_client = renewal_client is None
        self._renewal_client = renewal_client or httpx.AsyncClient(
            transport=wrapped_transport
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        sent_with = await self._authorize(request)
        response = await self._wrapped_transport.handle_async_request(request)
        if not self._policy.should_renew(response):
            return response

        logger.info(
            f"Request {request.method} {request.url} failed with status code:"
            f" {response.status_code}, renewing access token before retrying"
        )
        original_error = await self._to_status_error(request, response)
        try:
            access_credential = await self._renewed_access_credential(sent_with)
        except Exception as e:
            clear_error = await self._clear_credentials()
            raise RenewalFailedError(original_error, e, clear_error) from e

        request.headers.update(self._policy.authorization_headers(access_credential))
        logger.info(f"Retrying request {request.method} {request.url} with renewed token")
        return await self._wrapped_transport.handle_async_request(request)

    async def aclose(self) -> None:
        """
        Lets an in-flight renewal finish, then closes the underlying transport.
        """
        await self._policy.aclose()
        if self._owns_renewal_client:
            # The renewal client closes the wrapped transport it was built on.
            await self._renewal_client.aclose()
        else:
            await self._wrapped_transport.aclose()

    async def _authorize(self, request: httpx.Request) -> str | None:
        if (
            self._policy.config.wait_for_inflight_renewal
            and self._policy.renewal_in_progress
        ):
            logger.debug(
                f"Waiting for token renewal before sending {request.method} {request.url}"
            )
            await self._policy.wait_for_renewal()

        try:
            access_credential = await self._store.get(CredentialKind.ACCESS)
        except StoreError as e:
            logger.error(
                f"Request {request.method} {request.url} was not sent, failed to read access token: {e}"
            )
            raise CredentialRetrievalError(e) from e

        if access_credential is not None:
            request.headers.update(self._policy.authorization_headers(access_credential))
        return access_credential

    async def _renewed_access_credential(self, sent_with: str | None) -> str:
        current = await self._store.get(CredentialKind.ACCESS)
        if current is not None and current != sent_with:
            logger.info(
                f"Access token was already renewed to {mask_credential(current)}, skipping renewal"
            )
            return current
        return await self._policy.renew(self._renewal_client, self._store)

    async def _clear_credentials(self) -> StoreError | None:
        logger.warning("Token renewal failed, clearing stored tokens")
        try:
            await self._store.clear_all()
        except StoreError as e:
            logger.error(f"Failed to clear tokens after renewal failure: {e}")
            return e
        return None

    @staticmethod
    async def _to_status_error(
        request: httpx.Request, response: httpx.Response
    ) -> httpx.HTTPStatusError:
        await response.aread()
        await response.aclose()
        response.request = request
        return httpx.HTTPStatusError(
            f"Request {request.method} {request.url} failed with status code {response.status_code}",
            request=request,
            response=response,
        )
