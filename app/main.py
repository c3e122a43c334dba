import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.config import get_settings, Settings
from app.db.session import get_db
from app.matching import weights
from app.api.v1.router import api_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Compatibility scoring, discovery and matchmaking for a campus dating app",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint with database connectivity test."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "components": {
            "api": "healthy",
            "database": db_status,
        },
        "version": settings.app_version,
    }


@app.get("/config")
async def get_config(settings: Settings = Depends(get_settings)):
    """Get application configuration (non-sensitive values)."""
    return {
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "app_env": settings.app_env,
        "discover": {
            "feed_limit": settings.discover_feed_limit,
        },
        "matchmaking": {
            "suggestion_limit": settings.admin_suggestion_limit,
            "search_min_similarity": settings.profile_search_min_similarity,
        },
        "scoring": {
            "weights": {
                "interest": weights.INTEREST,
                "intent_match": weights.INTENT_MATCH,
                "intent_mismatch_penalty": weights.INTENT_MISMATCH_PENALTY,
                "friendship_bonus": weights.FRIENDSHIP_BONUS,
                "department_match": weights.DEPARTMENT_MATCH,
                "major_match": weights.MAJOR_MATCH,
                "cross_discipline_bonus": weights.CROSS_DISCIPLINE_BONUS,
                "personality_match": weights.PERSONALITY_MATCH,
                "personality_compatible": weights.PERSONALITY_COMPATIBLE,
                "personality_cap": weights.PERSONALITY_CAP,
            },
            "soul_mate_threshold": weights.SOUL_MATE_THRESHOLD,
            "bestie_threshold": weights.BESTIE_THRESHOLD,
        },
    }
