from typing import Any

import httpx

from token_renewal.renewal.policy import CredentialExtractor


def json_field_extractor(field: str) -> CredentialExtractor:
    """Build an extractor reading a top-level string field of a JSON response body.

    The extractor yields None when the body is not a JSON object or the field
    is missing, empty or not a string.
    """

    def _extract(response: httpx.Response) -> str | None:
        try:
            body: Any = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        value = body.get(field)
        if not isinstance(value, str) or not value:
            return None
        return value

    return _extract


access_token_extractor = json_field_extractor("access_token")
refresh_token_extractor = json_field_extractor("refresh_token")
