from sqlalchemy import create_engine, inspect, text

from app.core.config import Settings
from app.db.init_db import init_db


def test_init_db_creates_tables_for_sqlite_in_production():
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
    init_db(engine, drop_all=True, config=Settings(_env_file=None, ENV="production"))

    inspector = inspect(engine)
    assert "memories" in inspector.get_table_names()
    columns = {column["name"] for column in inspector.get_columns("memories")}
    assert columns == {"id", "user_id", "content", "cover_url", "is_public", "created_at"}


def test_init_db_drop_all_starts_from_empty_tables(engine):
    init_db(engine)
    with engine.begin() as connection:
        connection.execute(
            text(
                "INSERT INTO memories (id, user_id, content, cover_url, is_public, created_at) "
                "VALUES ('m1', 'alice', 'hi', 'http://x/a.png', 0, '2026-01-01 00:00:00')"
            )
        )

    init_db(engine, drop_all=True)

    with engine.connect() as connection:
        assert connection.execute(text("SELECT COUNT(*) FROM memories")).scalar() == 0
