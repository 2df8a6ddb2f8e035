"""Server infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and locale cookie configuration.

    Environment Variables:
        BACKEND_URL: Public base URL of the application (default: http://127.0.0.1:8000)
        LOCALE_COOKIE_NAME: Name of the cookie holding the chosen locale (default: locale)
        LOCALE_COOKIE_MAX_AGE: Cookie lifetime in seconds; unset means a session cookie
        COOKIE_SECURE: Only send the locale cookie over HTTPS (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        cookie_name = get_settings().server.LOCALE_COOKIE_NAME
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    LOCALE_COOKIE_NAME: str = Field(default="locale", alias="LOCALE_COOKIE_NAME")
    LOCALE_COOKIE_MAX_AGE: Optional[int] = Field(
        default=None, alias="LOCALE_COOKIE_MAX_AGE"
    )
    COOKIE_SECURE: bool = Field(default=False, alias="COOKIE_SECURE")

    @field_validator("LOCALE_COOKIE_NAME")
    @classmethod
    def validate_cookie_name(cls, v: str) -> str:
        """Reject blank cookie names."""
        if not v or not v.strip():
            raise ValueError("LOCALE_COOKIE_NAME must not be empty")
        return v.strip()
