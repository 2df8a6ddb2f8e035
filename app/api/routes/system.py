from fastapi import APIRouter, Request

from api.dependencies.rate_limits import SYSTEM_RATE_LIMIT, get_limiter
from infrastructure.services import SettingsDep, TranslationServiceDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


@router.get("/version")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Get the deployed git SHA."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(SYSTEM_RATE_LIMIT)
def get_health(
    request: Request,  # pylint: disable=unused-argument
    translation_service: TranslationServiceDep,
):
    """Healthcheck endpoint, listing the locales with a loaded bundle."""
    locales = sorted(locale.tag for locale in translation_service.get_available_locales())
    return {"status": "ok", "locales": locales}
