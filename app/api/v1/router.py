from fastapi import APIRouter
from app.api.v1 import health, me, memories

api_router = APIRouter()

api_router.include_router(health.router, tags=['health'])
api_router.include_router(me.router)
api_router.include_router(memories.router)
