from fastapi import APIRouter

from geocapture.api.routes import location

api_router = APIRouter(prefix="/api")

api_router.include_router(location.router, tags=["location"])
