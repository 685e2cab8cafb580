# main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, get_settings
from database import Database
from errors import register_exception_handlers
from middleware import RequestLoggingMiddleware, StaticFilesMiddleware
from routes import courses, dashboard, health, students


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.database.close()

    app = FastAPI(title="Student Course API", lifespan=lifespan)
    app.state.database = database or Database.from_settings(settings)

    # added last runs first: CORS, then static files, then the access log
    app.add_middleware(RequestLoggingMiddleware)
    if os.path.isdir(settings.static_dir):
        app.add_middleware(StaticFilesMiddleware, directory=settings.static_dir)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(courses.router)
    app.include_router(students.router)
    app.include_router(dashboard.router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
