from typing import Awaitable, Callable, Optional

import httpx
from loguru import logger

from token_renewal.config.settings import RenewalConfig
from token_renewal.exceptions.renewal import (
    AccessExtractionFailedError,
    MissingRefreshCredentialError,
    RenewalRejectedError,
)
from token_renewal.log.sensitive import mask_credential
from token_renewal.models import CredentialKind
from token_renewal.renewal.single_flight import SingleFlight
from token_renewal.store.base import CredentialStore

RenewalHandler = Callable[[httpx.AsyncClient, str], Awaitable[httpx.Response]]
CredentialExtractor = Callable[[httpx.Response], Optional[str]]


class RenewalPolicy:
    """
    Decides when a response calls for renewal, projects an access credential into request headers and runs
    the renewal exchange.

    Args:
        renewal_handler: Performs the renewal network call given a client and the refresh credential.
        access_extractor: Extracts the new access credential from a successful renewal response.
        refresh_extractor: Extracts the new refresh credential, if the response carries one.
        config: The renewal policy. Defaults to ``RenewalConfig()``.
    """

    def __init__(
        self,
        renewal_handler: RenewalHandler,
        access_extractor: CredentialExtractor,
        refresh_extractor: CredentialExtractor,
        config: RenewalConfig | None = None,
    ) -> None:
        self.renewal_handler = renewal_handler
        self.access_extractor = access_extractor
        self.refresh_extractor = refresh_extractor
        self.config = config or RenewalConfig()
        self._single_flight: SingleFlight[str] = SingleFlight("token renewal")

    @property
    def renewal_in_progress(self) -> bool:
        return self._single_flight.in_flight

    def should_renew(self, response: httpx.Response) -> bool:
        return response.status_code in self.config.renew_status_codes

    def authorization_headers(self, access_credential: str) -> dict[str, str]:
        return {
            key: prefix + access_credential
            for key, prefix in self.config.header_template.items()
        }

    async def renew(self, client: httpx.AsyncClient, store: CredentialStore) -> str:
        """Exchange the stored refresh credential for a new access credential.

        Concurrent calls share a single renewal sequence and its outcome.
        Returns the new access credential, which is already persisted in ``store``.
        Raises the failure of the last attempt when every attempt failed.
        """
        return await self._single_flight.run(lambda: self._renew(client, store))

    async def wait_for_renewal(self) -> None:
        await self._single_flight.wait()

    async def aclose(self) -> None:
        await self._single_flight.wait()

    async def _renew(self, client: httpx.AsyncClient, store: CredentialStore) -> str:
        refresh_credential = await store.get(CredentialKind.REFRESH)
        if refresh_credential is None:
            logger.warning("No refresh token found, cannot renew access token")
            raise MissingRefreshCredentialError()

        max_attempts = self.config.max_attempts
        attempts_made = 0
        while True:
            attempts_made += 1
            try:
                return await self._exchange(client, store, refresh_credential)
            except Exception as e:
                if attempts_made >= max_attempts:
                    logger.error(
                        f"Token renewal failed after {attempts_made} attempt(s): "
                        f"{type(e).__name__} - {str(e) or 'No error message'}"
                    )
                    raise
                logger.warning(
                    f"Token renewal attempt {attempts_made}/{max_attempts} failed with exception:"
                    f" {type(e).__name__} - {str(e) or 'No error message'}, retrying"
                )

    async def _exchange(
        self, client: httpx.AsyncClient, store: CredentialStore, refresh_credential: str
    ) -> str:
        logger.info(
            f"Renewing access token using refresh token {mask_credential(refresh_credential)}"
        )
        response = await self.renewal_handler(client, refresh_credential)
        if response.status_code not in self.config.success_status_codes:
            raise RenewalRejectedError(response.status_code)

        access_credential = self.access_extractor(response)
        if access_credential is None:
            raise AccessExtractionFailedError()
        # Access must be persisted before the refresh credential is touched.
        await store.save(CredentialKind.ACCESS, access_credential)

        new_refresh_credential = self.refresh_extractor(response)
        if new_refresh_credential is not None:
            await store.save(CredentialKind.REFRESH, new_refresh_credential)
        else:
            logger.debug("Renewal response carried no refresh token, keeping the current one")

        logger.info(f"Access token renewed: {mask_credential(access_credential)}")
        return access_credential
