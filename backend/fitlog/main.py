"""
Fitlog Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

from fitlog import __version__
from fitlog.api import stats, workouts
from fitlog.core.config import settings
from fitlog.core.database import AsyncSessionLocal, init_db
from fitlog.core.exceptions import register_exception_handlers
from fitlog.core.logging import get_logger, log_requests, setup_logging
from fitlog.models.workout import Workout

logger = get_logger(__name__)


async def seed_sample_data() -> None:
    """Insert two workouts dated today when the store is empty."""
    async with AsyncSessionLocal() as session:
        count = await session.scalar(select(func.count()).select_from(Workout))
        if count:
            return
        
        today = date.today().isoformat()
        session.add_all([
            Workout(date=today, type="Walking", duration=20, calories=90, notes="First run - seed"),
            Workout(date=today, type="Gym", duration=45, calories=220, notes="Seed workout"),
        ])
        await session.commit()
    
    logger.info("Seeded sample workouts", count=2)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    logger.info("Starting Fitlog Backend", version=__version__)
    await init_db()
    logger.info("Database initialized")
    
    if settings.SEED_SAMPLE_DATA:
        await seed_sample_data()
    
    yield
    
    # Shutdown
    logger.info("Shutting down Fitlog Backend")


app = FastAPI(
    title="Fitlog API",
    description="Personal workout log with summary statistics",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# Include routers
app.include_router(workouts.router, prefix="/api/workouts", tags=["workouts"])
app.include_router(stats.router, prefix="/api/stats", tags=["stats"])


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "ok": True,
        "port": settings.PORT,
        "time": datetime.now(timezone.utc).isoformat(),
    }


@app.api_route("/api/{path:path}", methods=["GET", "POST", "PUT", "DELETE"], include_in_schema=False)
async def api_not_found(request: Request):
    """Catch-all for unknown API routes."""
    return JSONResponse(
        status_code=404,
        content={"error": "API route not found", "pathTried": request.url.path},
    )
