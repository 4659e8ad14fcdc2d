from typing import Any

import httpx
from loguru import logger

from token_renewal.config.settings import RenewalSettings
from token_renewal.log.logger_setup import setup_logger
from token_renewal.renewal.policy import (
    CredentialExtractor,
    RenewalHandler,
    RenewalPolicy,
)
from token_renewal.store.base import CredentialStore
from token_renewal.store.factory import create_store
from token_renewal.transport import RenewalTransport


class TokenRenewalAsyncClient(httpx.AsyncClient):
    """
    This class is a wrapper around httpx.AsyncClient that routes every request through a RenewalTransport.
    The renewal transport wraps whatever transport the AsyncClient would otherwise use: the default one, a
    transport passed explicitly, the transports given in ``mounts`` and the ones created for proxies. All of
    them share one store and one policy.
    """

    def __init__(
        self,
        store: CredentialStore,
        policy: RenewalPolicy,
        **kwargs: Any,
    ):
        self._store = store
        self._policy = policy
        mounts: dict[str, httpx.AsyncBaseTransport | None] | None = kwargs.pop(
            "mounts", None
        )
        if mounts is not None:
            kwargs["mounts"] = {
                pattern: None if transport is None else self._wrap(transport)
                for pattern, transport in mounts.items()
            }
        super().__init__(**kwargs)

    @classmethod
    def from_settings(
        cls,
        renewal_handler: RenewalHandler,
        access_extractor: CredentialExtractor,
        refresh_extractor: CredentialExtractor,
        settings: RenewalSettings | None = None,
        **kwargs: Any,
    ) -> "TokenRenewalAsyncClient":
        settings = settings or RenewalSettings()
        setup_logger(settings.log_level, settings.log_enqueue)
        policy = RenewalPolicy(
            renewal_handler=renewal_handler,
            access_extractor=access_extractor,
            refresh_extractor=refresh_extractor,
            config=settings.renewal,
        )
        return cls(store=create_store(settings), policy=policy, **kwargs)

    @property
    def store(self) -> CredentialStore:
        return self._store

    @property
    def policy(self) -> RenewalPolicy:
        return self._policy

    def _wrap(self, transport: httpx.AsyncBaseTransport) -> RenewalTransport:
        return RenewalTransport(
            wrapped_transport=transport,
            store=self._store,
            policy=self._policy,
        )

    def _init_transport(  # type: ignore[override]
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> httpx.AsyncBaseTransport:
        if transport is None:
            transport = httpx.AsyncHTTPTransport(**kwargs)
        else:
            logger.debug(f"Wrapping custom transport {type(transport).__name__}")

        return self._wrap(transport)

    def _init_proxy_transport(  # type: ignore[override]
        self, proxy: httpx.Proxy, **kwargs: Any
    ) -> httpx.AsyncBaseTransport:
        return self._wrap(httpx.AsyncHTTPTransport(proxy=proxy, **kwargs))
