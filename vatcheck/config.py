"""Application configuration via pydantic-settings.

Settings come from the step environment only. The working directory is the
repository being checked, so no .env file is read from it. Action inputs
come from the ``INPUT_*`` variables the Actions runner exports for each
declared input. Nothing is loaded at import time; ``main`` builds both.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """VeriCorp validation API endpoint settings."""

    model_config = SettingsConfigDict(extra="ignore")

    vericorp_base_url: str = Field(
        default="https://vericorp-api.p.rapidapi.com",
        description="Base URL of the VeriCorp API",
    )
    vericorp_host: str = Field(
        default="vericorp-api.p.rapidapi.com",
        description="Value sent in the X-RapidAPI-Host header",
    )
    vericorp_timeout: float = Field(default=10.0, description="Total request timeout in seconds")
    vericorp_connect_timeout: float = Field(default=5.0, description="Connect timeout in seconds")


class RunnerSettings(BaseSettings):
    """Files the Actions runner exposes for step outputs and the job summary."""

    model_config = SettingsConfigDict(extra="ignore")

    github_output: str | None = Field(default=None, description="Path of the step output file")
    github_step_summary: str | None = Field(default=None, description="Path of the job summary file")


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.api.vericorp_base_url
        settings.runner.github_output
    """

    model_config = SettingsConfigDict(extra="ignore")

    log_level: str = Field(default="INFO")

    api: ApiSettings = Field(default_factory=ApiSettings)
    runner: RunnerSettings = Field(default_factory=RunnerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


class ActionInputs(BaseSettings):
    """Inputs declared in action.yml.

    A missing variable stays ``None`` so the runner can tell "not supplied"
    apart from "supplied but blank".
    """

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    # The runner keeps the hyphen; composite steps pass the underscore form
    vat_numbers: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_VAT-NUMBERS", "INPUT_VAT_NUMBERS"),
    )
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_API-KEY", "INPUT_API_KEY"),
    )
    fail_on_invalid_raw: str = Field(
        default="",
        validation_alias=AliasChoices("INPUT_FAIL-ON-INVALID", "INPUT_FAIL_ON_INVALID"),
    )

    @field_validator("vat_numbers", "fail_on_invalid_raw", mode="before")
    @classmethod
    def strip_value(cls, v: str | None) -> str | None:
        """Trim surrounding whitespace like the Actions toolkit does."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("api_key", mode="before")
    @classmethod
    def strip_secret(cls, v: str | SecretStr | None) -> str | SecretStr | None:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def fail_on_invalid(self) -> bool:
        """Only the exact string ``true`` enables failing on invalid numbers."""
        return self.fail_on_invalid_raw == "true"

