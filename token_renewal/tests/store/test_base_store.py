import pytest

from token_renewal.exceptions.store import StoreError
from token_renewal.log.sensitive import sensitive_log_filter
from token_renewal.models import CredentialKind
from token_renewal.store.memory import InMemoryCredentialStore
from token_renewal.tests.helpers.stores import FailingCredentialStore


@pytest.mark.asyncio
async def test_get_failure_is_wrapped() -> None:
    store = FailingCredentialStore({("read", CredentialKind.REFRESH)})

    with pytest.raises(StoreError) as exc_info:
        await store.get(CredentialKind.REFRESH)

    error = exc_info.value
    assert error.operation == "get"
    assert error.kind is CredentialKind.REFRESH
    assert isinstance(error.cause, OSError)
    assert error.__cause__ is error.cause
    assert "Failed to get refresh token" in str(error)


@pytest.mark.asyncio
async def test_save_failure_is_wrapped() -> None:
    store = FailingCredentialStore({("write", CredentialKind.ACCESS)})

    with pytest.raises(StoreError) as exc_info:
        await store.save(CredentialKind.ACCESS, "A1")

    assert exc_info.value.operation == "save"
    assert exc_info.value.kind is CredentialKind.ACCESS
    assert "Failed to save access token" in str(exc_info.value)


@pytest.mark.asyncio
async def test_clear_all_attempts_both_kinds() -> None:
    store = FailingCredentialStore(
        {("delete", CredentialKind.ACCESS)},
        storage={"access_token": "A1", "refresh_token": "R1"},
    )

    with pytest.raises(StoreError) as exc_info:
        await store.clear_all()

    error = exc_info.value
    assert error.operation == "clear_all"
    assert error.kind is None
    assert isinstance(error.cause, StoreError)
    assert error.cause.kind is CredentialKind.ACCESS
    # The refresh token is cleared even though clearing the access token failed
    assert await store.get(CredentialKind.REFRESH) is None
    assert await store.get(CredentialKind.ACCESS) == "A1"


@pytest.mark.asyncio
async def test_clear_all_succeeds_when_both_clear() -> None:
    store = FailingCredentialStore(
        set(), storage={"access_token": "A1", "refresh_token": "R1"}
    )

    await store.clear_all()

    pair = await store.load_pair()
    assert pair.access is None
    assert pair.refresh is None
    assert pair.is_authorized is False


@pytest.mark.asyncio
async def test_stored_credentials_are_hidden_from_logs() -> None:
    store = InMemoryCredentialStore({"refresh_token": "seeded-refresh-credential"})

    await store.save(CredentialKind.ACCESS, "saved-access-credential")
    await store.get(CredentialKind.REFRESH)

    masked = sensitive_log_filter.mask_string(
        "using saved-access-credential and seeded-refresh-credential"
    )
    assert "saved-access-credential" not in masked
    assert "seeded-refresh-credential" not in masked
