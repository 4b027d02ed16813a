import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from app.config.settings import settings
from app.database import engine
from app.routers import auth, suggestions, comments
from app.utils.errors import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger("safety_portal")

# A missing signing secret is fatal
settings.require_jwt_secret()

app = FastAPI(
    title="Safety Suggestion Portal",
    description="Employees submit safety suggestions; administrators review, comment and triage them",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(suggestions.router, prefix="/api")
app.include_router(comments.router, prefix="/api")

@app.on_event("startup")
def check_database_connection():
    """Log the database clock on startup, or the connection error"""
    try:
        with engine.connect() as conn:
            now = conn.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
        logger.info(f"Database connected: {now}")
    except Exception:
        logger.exception("Database connection error")

# Root route
@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "Safety App Backend is Running!"

@app.get("/health")
def health():
    return {"status": "ok"}
