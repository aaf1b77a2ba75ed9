import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.http.health import router as health_router
from app.api.http.documents import router as documents_router
from app.core.auth import TokenAuthenticator
from app.core.config import Settings, get_settings
from app.core.db import create_engine, create_session_factory
from app.core.logging_config import configure_logging
from app.db.models import Base

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.create_tables:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")
    yield
    await app.state.engine.dispose()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Ошибки валидации запроса отдаём как 400 со списком сообщений"""
    messages = [error["msg"] for error in exc.errors()]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": messages})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения; настройки передаются явно или читаются из окружения"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="DocShare",
        description="API для совместного доступа к документам",
        version="1.0.0",
        lifespan=lifespan
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.authenticator = TokenAuthenticator.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(documents_router)

    return app
