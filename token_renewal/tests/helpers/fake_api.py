import asyncio
from typing import Any

import httpx

API_URL = "https://api.example.com"
AUTH_URL = "https://auth.example.com/token"


class FakeApi:
    """
    Mock server for httpx.MockTransport.
    Data requests succeed only with an accepted bearer token; requests to AUTH_URL exchange a refresh token.
    """

    def __init__(
        self,
        valid_access_tokens: set[str],
        renewal_status: int = 200,
        renewal_body: dict[str, Any] | None = None,
        renewal_delay: float = 0.0,
    ) -> None:
        self.valid_access_tokens = valid_access_tokens
        self.renewal_status = renewal_status
        self.renewal_body = renewal_body or {
            "access_token": "A2",
            "refresh_token": "R2",
        }
        self.renewal_delay = renewal_delay
        self.renewal_calls = 0
        # (method, path, authorization header, body) of every data request as seen on arrival
        self.seen: list[tuple[str, str, str | None, bytes]] = []
        # When set, requests carrying a rejected token wait here before getting their 401
        self.reject_barrier: asyncio.Barrier | None = None
        self.release_renewal: asyncio.Event | None = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        if str(request.url) == AUTH_URL:
            return await self._renew(request)

        authorization = request.headers.get("Authorization")
        self.seen.append(
            (request.method, request.url.path, authorization, request.content)
        )
        token = (authorization or "").removeprefix("Bearer ")
        if token in self.valid_access_tokens:
            return httpx.Response(200, json={"path": request.url.path, "token": token})

        if self.reject_barrier is not None:
            await self.reject_barrier.wait()
        return httpx.Response(401, json={"error": "token expired"})

    async def _renew(self, request: httpx.Request) -> httpx.Response:
        self.renewal_calls += 1
        if self.release_renewal is not None:
            await self.release_renewal.wait()
        if self.renewal_delay:
            await asyncio.sleep(self.renewal_delay)
        if self.renewal_status != 200:
            return httpx.Response(self.renewal_status, json={"error": "invalid_grant"})
        return httpx.Response(200, json=self.renewal_body)


async def refresh_with_post(
    client: httpx.AsyncClient, refresh_token: str
) -> httpx.Response:
    return await client.post(AUTH_URL, json={"refresh_token": refresh_token})
