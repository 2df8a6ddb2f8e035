"""Locale cookie persistence.

Reads the stored locale preference from request cookies and writes or
deletes it on the outgoing response. Writes are best-effort: a failure is
logged and otherwise treated like success.
"""

from typing import Mapping, Optional

import structlog
from starlette.responses import Response

from infrastructure.i18n.models import Locale

logger = structlog.get_logger().bind(component="i18n.cookies")

DEFAULT_COOKIE_NAME = "locale"


class LocaleCookie:
    """Reads and writes the single ``locale`` cookie.

    Attributes:
        name: Cookie name.
        max_age: Lifetime in seconds, or None for a session cookie.
        secure: Whether the cookie is restricted to HTTPS.
    """

    def __init__(
        self,
        name: str = DEFAULT_COOKIE_NAME,
        max_age: Optional[int] = None,
        secure: bool = False,
    ):
        self.name = name
        self.max_age = max_age
        self.secure = secure

    def read(self, cookies: Mapping[str, str]) -> Optional[str]:
        """Return the stored locale tag, or None when no cookie is present.

        Empty values count as absent.
        """
        value = cookies.get(self.name)
        return value or None

    def write(self, response: Response, locale: Locale) -> None:
        try:
            response.set_cookie(
                key=self.name,
                value=locale.tag,
                max_age=self.max_age,
                path="/",
                secure=self.secure,
                httponly=True,
                samesite="lax",
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("locale_cookie_write_failed", locale=locale.tag, error=str(e))
            return
        logger.info("locale_cookie_written", locale=locale.tag)

    def delete(self, response: Response) -> None:
        try:
            response.delete_cookie(
                key=self.name,
                path="/",
                secure=self.secure,
                httponly=True,
                samesite="lax",
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("locale_cookie_delete_failed", error=str(e))
            return
        logger.info("locale_cookie_deleted")


class ResponseCookieStore:
    """Binds a LocaleCookie to the response of the current request.

    Handed to the view so it can persist locale changes without knowing
    about the HTTP layer.
    """

    def __init__(self, cookie: LocaleCookie, response: Response):
        self.cookie = cookie
        self.response = response

    def save(self, locale: Locale) -> None:
        self.cookie.write(self.response, locale)

    def clear(self) -> None:
        self.cookie.delete(self.response)
