import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_error_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router

load_dotenv()


def _split_env(name: str, default: str = "*") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "info").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    _configure_logging()
    application = FastAPI(title="Task Tracker API")

    # Los errores se registran primero: CORS tiene que envolver también los 500.
    register_error_handlers(application)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=_split_env("CORS_ORIGINS"),
        allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
        allow_methods=_split_env("CORS_ALLOW_METHODS"),
        allow_headers=_split_env("CORS_ALLOW_HEADERS"),
    )

    application.include_router(tasks_router)
    return application


app = create_app()
