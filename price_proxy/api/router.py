from fastapi import APIRouter

from price_proxy.api.routes import health, search

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(search.router, tags=["search"])
