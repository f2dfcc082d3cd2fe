"""
Job Board API - Main Application

FastAPI backend with:
- PostgreSQL for jobs and companies
- JWT bearer authentication (anonymous, user, admin)
- {"error": {"message", "status"}} error bodies

Run: uvicorn jobboard.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard import __version__
from jobboard.api.errors import register_exception_handlers
from jobboard.api.routes import api_router
from jobboard.core.logging import get_logger, setup_logging
from jobboard.db.postgres import check_db_connection

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Job Board API",
    description="""
    CRUD API over job postings.

    ## Features
    - **Jobs**: Create, list, filter (minSalary, hasEquity, title), update, delete
    - **Companies**: Embedded summary on job detail
    - **Authorization**: Reads are public, writes are admin only
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Configure logging on startup."""
    setup_logging()
    logger.info("Job Board API %s starting", __version__)


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected" if check_db_connection() else "disconnected"
    }
