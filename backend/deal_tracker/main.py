import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from deal_tracker.api import api_router
from deal_tracker.core.config import Settings, settings as default_settings
from deal_tracker.core.database import Database
from deal_tracker.core.exceptions import ValidationError
from deal_tracker.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Сборка приложения.

    Хендл БД открывается при старте и закрывается при остановке. Если database
    передан снаружи (тесты), приложение им не владеет и не закрывает его.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_db = database is None
        db = database or Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        db.create_all()
        app.state.db = db
        logger.info("Database ready")
        try:
            yield
        finally:
            if owns_db:
                db.dispose()

    app = FastAPI(
        title="Property Deal Tracker API",
        description="API для учета сделок с недвижимостью: задачи, документы, общение, контакты",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        # Подробности уже залогированы сервисом
        return JSONResponse(status_code=500, content={"detail": "Storage error"})

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        return {"message": "Property Deal Tracker API", "version": "1.0.0"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run(settings: Optional[Settings] = None) -> None:
    """Запуск API через uvicorn"""
    settings = settings or default_settings
    uvicorn.run("deal_tracker.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
