from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureOptions(BaseSettings):
    """Feature options consumed by the generated-document path mapper.

    Loaded once from environment variables (or a .env file) and frozen, so a
    single instance can be handed to any number of mappers.
    """

    INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH: bool = Field(
        default=False,
        description=(
            "Embed a per-project token in generated code file names so the same source "
            "document can be projected once per build configuration."
        ),
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True)

    @field_validator("INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH", mode="before")
    @classmethod
    def parse_flag(cls, v):  # type: ignore[no-redef]
        """
        Treat an empty env value as unset.

        Examples:
            - "" → False
            - " true " → "true" (pydantic then coerces to True)
        """
        if v is None:
            return False
        if isinstance(v, str):
            s = v.strip()
            return s if s else False
        return v

    # Convenience helpers
    @property
    def include_project_key(self) -> bool:
        return self.INCLUDE_PROJECT_KEY_IN_GENERATED_FILE_PATH


# Eagerly load configuration at import time for convenience across modules
config = FeatureOptions()
