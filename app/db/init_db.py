from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.core.config import Settings, settings
from app.models import memory  # noqa: F401


def init_db(engine: Engine, drop_all: bool = False, config: Optional[Settings] = None) -> None:
    config = config or settings
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if (
        engine.url.get_backend_name() == 'sqlite'
        or config.ENV != 'production'
        or config.AUTO_CREATE_TABLES
    ):
        SQLModel.metadata.create_all(engine)
        logger.debug('tables ensured on {}', engine.url.render_as_string(hide_password=True))
