# main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from app.config import settings
from app.database import Base, engine, mask_db_url
from app.errors import register_exception_handlers
from app.models import Post, ProfileModel, User  # noqa: F401
from app.routers import posts, profiles, users
from app.routers.health import router as health_router


logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _init_database() -> None:
    # An unreachable database at startup is fatal; the error propagates and the process exits.
    logger.info("database url=%s", mask_db_url(settings.db_url))
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        if settings.auto_create_schema:
            Base.metadata.create_all(bind=engine)
    except Exception:
        logger.critical("database unavailable at startup url=%s", mask_db_url(settings.db_url))
        raise


def create_app() -> FastAPI:
    _configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _init_database()
        logger.info("%s %s started", settings.app_name, settings.version)
        yield
        logger.info("%s shutting down", settings.app_name)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    @application.get("/", include_in_schema=False)
    def root() -> dict:
        return {"msg": f"Welcome to {settings.app_name}"}

    application.include_router(health_router)
    application.include_router(users.router, prefix="/api/users", tags=["users"])
    application.include_router(profiles.router, prefix="/api/profiles", tags=["profiles"])
    application.include_router(posts.router, prefix="/api/posts", tags=["posts"])
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
