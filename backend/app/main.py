from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.api.routers import properties, spaces, stats
from app.core.config import settings
from app.core.database import Base, engine, get_db
from app.modules.properties.validation import PropertyValidationError
import logging

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Property Search API",
    description="API for searching property listings and their spaces",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(properties.router, prefix="/properties", tags=["properties"])
app.include_router(spaces.router, prefix="/spaces", tags=["spaces"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])


@app.exception_handler(PropertyValidationError)
async def property_validation_error_handler(request: Request, exc: PropertyValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message}
    )


@app.on_event("startup")
async def startup_event():
    """Create the schema on startup unless migrations own it"""
    try:
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)

        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


@app.get("/")
async def root():
    return {"message": "Property Search API"}


@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Health check endpoint that verifies the database connection"""
    health_status = {
        "status": "healthy",
        "services": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["services"]["database"] = "healthy"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["services"]["database"] = "unhealthy"
        health_status["error"] = str(e)

    return health_status
