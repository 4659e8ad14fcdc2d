import re
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Record

REDACTED = "[REDACTED]"
VISIBLE_PREFIX_LENGTH = 6

secret_patterns = {
    "Bearer token": r"[bB]earer\s+[A-Za-z0-9\-._~+/]+=*",
    "JSON Web Token": r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*",
}


def visible_prefix(secret: str) -> str:
    # At most a quarter of the secret is shown.
    return secret[: min(VISIBLE_PREFIX_LENGTH, len(secret) // 4)]


def mask_credential(credential: str | None) -> str:
    if credential is None:
        return "<none>"
    return visible_prefix(credential) + REDACTED


class SensitiveLogFilter:
    def __init__(self) -> None:
        self.compiled_patterns = [
            re.compile(pattern) for pattern in secret_patterns.values()
        ]
        self._hidden_strings: set[str] = set()

    def hide_sensitive_strings(self, *tokens: str) -> None:
        for token in tokens:
            token = token.strip()
            if token and token not in self._hidden_strings:
                self._hidden_strings.add(token)
                self.compiled_patterns.append(re.compile(re.escape(token)))

    def mask_string(self, string: str, full_hide: bool = False) -> str:
        masked_string = string
        for pattern in self.compiled_patterns:
            replace: Callable[[re.Match[str]], str] | str = (
                REDACTED
                if full_hide
                else lambda match: visible_prefix(match.group()) + REDACTED
            )
            masked_string = pattern.sub(replace, masked_string)
        return masked_string

    def create_filter(self, full_hide: bool = False) -> Callable[["Record"], bool]:
        def _filter(record: "Record") -> bool:
            record["message"] = self.mask_string(record["message"], full_hide)
            return True

        return _filter


sensitive_log_filter = SensitiveLogFilter()
