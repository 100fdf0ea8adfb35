from fastapi import APIRouter

from .sms import router as sms_router

api_router = APIRouter(prefix="/api")
api_router.include_router(sms_router)

__all__ = ["api_router"]
