from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from sqlalchemy import text

from eventdesk.api.routes import events, health, pages, register
from eventdesk.core.config import settings
from eventdesk.core.logging import setup_logging
from eventdesk.db.base import Base
from eventdesk.db.seed import seed_demo_data
from eventdesk.db.session import SessionLocal, engine
from eventdesk.models import sheet_row  # noqa: F401  (registers the table)

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    logger.info("🚀 Starting Event Registration Desk...")

    logger.info("📦 Creating database tables...")
    Base.metadata.create_all(bind=engine)

    if settings.SEED_DEMO_DATA:
        seed_demo_data()

    try:
        db = SessionLocal()
        db.execute(text("SELECT 1"))
        db.close()
        logger.info("✅ Database connection successful")
    except Exception as e:
        logger.error(f"❌ Database connection failed: {e}")
        raise

    yield

    logger.info("👋 Shutting down...")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Multi-tenant event registration intake",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Keep the {error} response shape for bodies that do not parse"""
    logger.warning(f"Unparseable request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})

app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(events.router, prefix="/api", tags=["Events"])
app.include_router(register.router, prefix="/api", tags=["Registration"])

@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "operational",
        "docs": "/docs",
        "endpoints": {
            "health": "/api/health",
            "events": "/api/events?company={company}",
            "register": "/api/events/register",
            "registration_page": "/{company}/{event}/register"
        }
    }

# Catch-all page route goes last
app.include_router(pages.router, tags=["Pages"])

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
