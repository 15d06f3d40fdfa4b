from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy.engine import Engine
from app.api.errors import register_exception_handlers
from app.api.v1.router import api_router
from app.core.config import Settings, settings
from app.core.logging import configure_logging
from app.db.init_db import init_db
from app.db.session import create_db_engine

configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)


def create_app(config: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the API around ``config``.

    The database engine is created on startup from ``DATABASE_URL`` and
    disposed on shutdown. A caller-supplied ``engine`` is used as is and left
    open for its owner to dispose.
    """
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        app.state.engine = create_db_engine(config.DATABASE_URL) if owns_engine else engine
        init_db(app.state.engine, config=config)
        logger.info('{} started ({})', config.PROJECT_NAME, config.ENV)
        try:
            yield
        finally:
            if owns_engine:
                app.state.engine.dispose()
            logger.info('{} stopped', config.PROJECT_NAME)

    app = FastAPI(title=config.PROJECT_NAME, debug=config.DEBUG, lifespan=lifespan)
    app.state.settings = config

    allow_origins = config.CORS_ORIGINS
    allow_credentials = '*' not in allow_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=config.API_PREFIX)
    return app


app = create_app()
