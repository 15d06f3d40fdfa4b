from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine


def create_db_engine(url: str) -> Engine:
    if url.startswith('sqlite'):
        options = {'connect_args': {'check_same_thread': False}}
        # an in-memory database only lives as long as its single connection
        if url in ('sqlite://', 'sqlite:///') or ':memory:' in url:
            options['poolclass'] = StaticPool
        return create_engine(url, **options)
    return create_engine(url, pool_pre_ping=True)


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_session(request: Request) -> Iterator[Session]:
    with Session(get_engine(request)) as session:
        yield session
