import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from employee_api.api.employees import router as employees_router
from employee_api.api.frontend import router as frontend_router
from employee_api.api.health import router as health_router
from employee_api.core.config import ConfigurationError, get_settings, require_database_url
from employee_api.core.errors import register_error_handlers
from employee_api.db.session import connect

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The server entry point connects before binding; this covers
    # `uvicorn employee_api.main:app` launched directly.
    if getattr(app.state, "session_factory", None) is None:
        try:
            database_url = require_database_url(get_settings())
        except ConfigurationError as exc:
            logger.critical("%s", exc)
            raise
        app.state.session_factory = connect(database_url)
    yield
    app.state.session_factory.kw["bind"].dispose()


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="Employee List", lifespan=lifespan)
    app.state.session_factory = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(frontend_router)
    app.include_router(health_router)
    app.include_router(employees_router)

    # Bundle assets; mounted last so API routes take precedence
    if settings.FRONTEND_DIR.is_dir():
        app.mount("/", StaticFiles(directory=settings.FRONTEND_DIR, html=True), name="frontend")
    else:
        logger.warning("Front-end bundle directory %s not found; static files disabled", settings.FRONTEND_DIR)

    return app


app = create_app()
