"""Main router for API v1."""

from fastapi import APIRouter

from taxbot.api.v1.routes.chat import router as chat_router

api_router = APIRouter()

api_router.include_router(chat_router, prefix="/chat", tags=["chat"])
