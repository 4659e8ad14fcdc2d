import sys
from typing import Any

import pytest
from loguru import logger

from token_renewal.log.logger_setup import setup_logger
from token_renewal.log.sensitive import SensitiveLogFilter, mask_credential


def test_mask_credential() -> None:
    assert mask_credential("abcdefghijklmnopqrstuvwxyz") == "abcdef[REDACTED]"
    assert mask_credential("abcdefghijklmnop") == "abcd[REDACTED]"
    assert mask_credential(None) == "<none>"


@pytest.mark.parametrize("credential", ["a", "abc", "s3cret", "abcdefg"])
def test_short_credentials_are_never_shown(credential: str) -> None:
    assert credential not in mask_credential(credential)


def test_bearer_tokens_are_masked() -> None:
    log_filter = SensitiveLogFilter()

    masked = log_filter.mask_string("Authorization: Bearer secret-access-token")

    assert "secret-access-token" not in masked
    assert "Bearer[REDACTED]" in masked


def test_registered_strings_are_hidden() -> None:
    log_filter = SensitiveLogFilter()
    log_filter.hide_sensitive_strings("my-refresh-token", "  ")

    assert log_filter.mask_string("using my-refresh-token", full_hide=True) == (
        "using [REDACTED]"
    )


def test_registered_short_strings_are_fully_masked() -> None:
    log_filter = SensitiveLogFilter()
    log_filter.hide_sensitive_strings("s3cret", "s3cret")

    assert log_filter.mask_string("token s3cret") == "token [REDACTED]"
    assert len(log_filter.compiled_patterns) == 3


def test_filter_rewrites_record_message() -> None:
    log_filter = SensitiveLogFilter()
    record: Any = {"message": "sent Bearer abcdefghijkl"}

    assert log_filter.create_filter(full_hide=True)(record) is True
    assert record["message"] == "sent [REDACTED]"


def test_setup_logger_masks_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logger("INFO", enqueue=False)
    try:
        logger.info("Retrying with Authorization: Bearer very-secret-token")
        logger.debug("not shown")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    output = capsys.readouterr().out
    assert "very-secret-token" not in output
    assert "Retrying with Authorization" in output
    assert "not shown" not in output
