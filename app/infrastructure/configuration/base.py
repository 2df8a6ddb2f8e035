"""Base class shared by the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """Settings section read from the environment or ``.env``.

    Field names are the environment variable names (case sensitive);
    unrelated variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
