from fastapi import APIRouter

from app.api.v1.analysis import router as analysis_router
from app.api.v1.github import router as github_router

api_router = APIRouter(prefix="/api")
api_router.include_router(github_router)
api_router.include_router(analysis_router)
