# app/main.py

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.core.config import settings
from app.core.database import Database
from app.core.exceptions import register_exception_handlers
from app.services.admin_service import ensure_default_admin

# Routers
from app.api.endpoints import (
    admins as admins_router,
    catalog as catalog_routers,
    students as students_router,
    universities as universities_router,
)

# ------------------------------------------------------------
# LOGURU CONFIGURATION
# ------------------------------------------------------------
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=settings.ENV != "prod",
)


# ------------------------------------------------------------
# LIFESPAN (store handle startup / shutdown)
# ------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Admission Portal Backend...")

    db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    app.state.db = db

    try:
        await db.ping()
        await db.init_db()
        logger.success("Database tables ready.")
    except Exception:
        logger.exception("Startup aborted: database initialization failed.")
        await db.dispose()
        raise

    try:
        async with db.session() as session:
            await ensure_default_admin(session)
    except Exception:
        logger.exception("Default admin seeding failed.")

    logger.success("Backend startup completed successfully.")
    yield

    await db.dispose()
    logger.info("Database connections closed.")


# ------------------------------------------------------------
# FASTAPI APP INIT
# ------------------------------------------------------------
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="REST backend for the university admission portal.",
    lifespan=lifespan,
)

register_exception_handlers(app)

# ------------------------------------------------------------
# UPLOADED DOCUMENTS
# ------------------------------------------------------------
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# ------------------------------------------------------------
# CORS CONFIGURATION
# ------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ------------------------------------------------------------
# REGISTER ROUTERS
# ------------------------------------------------------------
app.include_router(students_router.router)
app.include_router(universities_router.router)
for router in catalog_routers.routers:
    app.include_router(router)
app.include_router(admins_router.router)


# ------------------------------------------------------------
# ROOT HEALTH CHECK
# ------------------------------------------------------------
@app.get("/", tags=["System"])
async def root():
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": app.version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
