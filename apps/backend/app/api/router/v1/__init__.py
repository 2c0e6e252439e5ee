from fastapi import APIRouter

from .analyze import analyze_router

v1_router = APIRouter(tags=["analysis"])
v1_router.include_router(analyze_router)

__all__ = ["v1_router"]
