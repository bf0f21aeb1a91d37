from fastapi import APIRouter

from src.expovote.api.routes import dashboard, health, results, voting

page_router = APIRouter()
page_router.include_router(dashboard.router)
page_router.include_router(voting.router)
page_router.include_router(results.router)
page_router.include_router(health.router)
