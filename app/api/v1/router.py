from fastapi import APIRouter

from app.api.v1.endpoints import admin, compatibility, discover, matches, profiles, vocabulary

api_router = APIRouter()
api_router.include_router(vocabulary.router)
api_router.include_router(profiles.router)
api_router.include_router(compatibility.router)
api_router.include_router(discover.router)
api_router.include_router(matches.router)
api_router.include_router(admin.router)
