"""Main view routes.

Serves the localized form and handles its events: language selection,
clearing the stored preference, and greeting.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse, JSONResponse

from api.dependencies.locale import RequestLocaleDep
from infrastructure.i18n import ResponseCookieStore
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    GreetServiceDep,
    LocaleCookieDep,
    LocaleResolverDep,
    TranslationServiceDep,
)
from modules.main_view import UI, MainView
from modules.main_view.schemas import (
    ErrorResponse,
    GreetRequest,
    LocaleChangeRequest,
    ViewUpdateResponse,
)

logger = get_module_logger()
router = APIRouter(tags=["Main view"])


def get_main_view(
    response: Response,
    request_locale: RequestLocaleDep,
    resolver: LocaleResolverDep,
    translation_service: TranslationServiceDep,
    greet_service: GreetServiceDep,
    locale_cookie: LocaleCookieDep,
) -> MainView:
    """Build the view for this request with the resolved locale."""
    return MainView(
        ui=UI(request_locale.locale),
        translation_service=translation_service,
        greet_service=greet_service,
        supported_locales=resolver.supported_locales,
        preference_store=ResponseCookieStore(locale_cookie, response),
        cookie_locale=request_locale.cookie_value,
    )


MainViewDep = Annotated[MainView, Depends(get_main_view)]


def _view_update(view: MainView) -> ViewUpdateResponse:
    return ViewUpdateResponse(
        locale=view.locale.tag,
        labels=view.labels(),
        notifications=view.ui.notifications,
        reload=view.ui.reload_requested,
    )


@router.get("/", response_class=HTMLResponse)
def main_page(view: MainViewDep):
    """Render the main view in the resolved locale."""
    logger.info("main_view_rendered", locale=view.locale.tag)
    return HTMLResponse(content=view.render())


@router.post(
    "/locale",
    response_model=ViewUpdateResponse,
    responses={422: {"model": ErrorResponse}},
)
def change_locale(
    payload: LocaleChangeRequest,
    view: MainViewDep,
    resolver: LocaleResolverDep,
):
    """Store the selected locale in the cookie and return re-translated labels."""
    try:
        locale = resolver.resolve_from_string(payload.locale)
    except ValueError as e:
        return JSONResponse(status_code=422, content={"message": str(e)})

    view.select_locale(locale)
    return _view_update(view)


@router.post("/locale/clear", response_model=ViewUpdateResponse)
def clear_locale(view: MainViewDep):
    """Delete the locale cookie and ask the browser to reload."""
    view.clear_locale_preference()
    return _view_update(view)


@router.post("/greet", response_model=ViewUpdateResponse)
def greet(payload: GreetRequest, view: MainViewDep):
    """Greet the user in the active locale."""
    view.greet(payload.name)
    return _view_update(view)
