from fastapi import APIRouter

from api.routes.main_view import router as main_view_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(main_view_router)
