from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from .api import cars
from .core.config import settings
from .core.database import SessionLocal, init_db

# Setup Logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI App
app = FastAPI(
    title=settings.APP_NAME,
    description="Catalog of car models and their customization options",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(
    cars.router,
    prefix="/api/cars",
    tags=["Cars"]
)


# Root Endpoint
@app.get("/", tags=["System"])
def read_root():
    """Welcome endpoint with API information"""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "documentation": "/docs",
        "health_check": "/health",
    }


# Health Check Endpoint
@app.get("/health", tags=["System"])
def health_check():
    """Checks that the database answers"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = f"error: {str(e)}"
    finally:
        db.close()

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": settings.APP_NAME,
        "timestamp": time.time(),
        "components": {"database": db_status},
    }


# Startup Event
@app.on_event("startup")
def startup_event():
    """Create any missing tables"""
    init_db()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} is ready")


# Request Logging Middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.3f}s"
    )

    return response


# Error Handlers: every failure goes out as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing fields are a 400, not FastAPI's default 422"""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    return JSONResponse(status_code=400, content={"error": "Invalid request. " + "; ".join(problems)})


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error(f"Internal server error at {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred."})
