"""
Main FastAPI Application
"""
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.database import init_db
from app.routers import auth, livestream, moderation

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SessionMiddleware,
                   secret_key=settings.SECRET_KEY,
                   session_cookie=settings.SESSION_COOKIE_NAME,
                   max_age=settings.COOKIE_EXPIRY,
                   same_site=settings.COOKIE_SAME_SITE,
                   https_only=settings.SESSION_SECURE)

# Routers
app.include_router(auth.router)
app.include_router(livestream.router)
app.include_router(moderation.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path params, query params and bodies are client errors"""
    return JSONResponse(status_code=400, content={"detail": "bad request", "errors": jsonable_encoder(exc.errors())})


# Startup event
@app.on_event("startup")
async def startup():
    """Create database tables"""
    try:
        init_db()
        logger.info("[STARTUP] Database tables created/verified")
    except SQLAlchemyError as e:
        logger.error(f"[STARTUP] Database creation error: {e}")
        raise


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API", "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
