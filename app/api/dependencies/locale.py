"""Request locale resolution dependencies."""

from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Request

from infrastructure.i18n import Locale, preferred_from_header
from infrastructure.services import LocaleCookieDep, LocaleResolverDep


@dataclass(frozen=True)
class RequestLocale:
    """Locale picked for the current request.

    Attributes:
        locale: The active locale.
        cookie_value: Raw locale cookie value, if the browser sent one.
        browser_preferred: Highest ranked Accept-Language tag, if any.
    """

    locale: Locale
    cookie_value: Optional[str]
    browser_preferred: Optional[Locale]


def get_request_locale(
    request: Request,
    resolver: LocaleResolverDep,
    locale_cookie: LocaleCookieDep,
) -> RequestLocale:
    """Resolve the active locale from cookie, browser header and default."""
    cookie_value = locale_cookie.read(request.cookies)
    browser_preferred = preferred_from_header(request.headers.get("accept-language"))
    locale = resolver.resolve(cookie_value, browser_preferred)
    return RequestLocale(
        locale=locale,
        cookie_value=cookie_value,
        browser_preferred=browser_preferred,
    )


RequestLocaleDep = Annotated[RequestLocale, Depends(get_request_locale)]
