from http import HTTPStatus
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from token_renewal.models import StorageMode

LogLevelType = Literal["ERROR", "WARNING", "INFO", "DEBUG", "CRITICAL"]


class RenewalConfig(BaseModel):
    """Immutable renewal policy.

    Attributes:
        renew_status_codes: Response statuses meaning the access credential expired.
        success_status_codes: Statuses of the renewal call that count as success.
        header_template: Header name to value prefix; the credential is appended to the prefix.
        max_attempts: Number of renewal exchanges tried before giving up.
        wait_for_inflight_renewal: Whether dispatch waits for a renewal that is
            already running before attaching the stored access credential.
    """

    model_config = ConfigDict(frozen=True)

    renew_status_codes: frozenset[int] = frozenset([HTTPStatus.UNAUTHORIZED])
    success_status_codes: frozenset[int] = frozenset([HTTPStatus.OK])
    header_template: dict[str, str] = Field(
        default_factory=lambda: {"Authorization": "Bearer "}
    )
    max_attempts: int = Field(default=1, ge=1)
    wait_for_inflight_renewal: bool = True


class RenewalSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOKEN_RENEWAL__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="./token_renewal.yaml",
        extra="ignore",
    )

    log_level: LogLevelType = "INFO"
    log_enqueue: bool = True
    storage_mode: StorageMode = StorageMode.memory
    storage_dir: str | None = None
    renewal: RenewalConfig = Field(default_factory=RenewalConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )
