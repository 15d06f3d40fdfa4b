from typing import Optional
from loguru import logger
from sqlmodel import Session, select
from app.models.memory import Memory
from app.schemas.memory import MemoryCreate, MemoryUpdate

EXCERPT_SUFFIX = '...'


def make_excerpt(content: str, length: int = 115) -> str:
    # the suffix is appended even when nothing was cut
    return content[:length] + EXCERPT_SUFFIX


def is_owner(record: Memory, user_id: str) -> bool:
    return record.user_id == user_id


def can_read(record: Memory, user_id: str) -> bool:
    return record.is_public or is_owner(record, user_id)


def list_memories(session: Session, user_id: str) -> list[Memory]:
    statement = (
        select(Memory)
        .where(Memory.user_id == user_id)
        .order_by(Memory.created_at.asc(), Memory.id.asc())
    )
    return list(session.exec(statement).all())


def get_memory(session: Session, memory_id: str) -> Optional[Memory]:
    return session.exec(select(Memory).where(Memory.id == memory_id)).first()


def create_memory(session: Session, user_id: str, payload: MemoryCreate) -> Memory:
    record = Memory(
        user_id=user_id,
        content=payload.content,
        cover_url=payload.cover_url,
        is_public=payload.is_public,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info('memory {} created by {}', record.id, user_id)
    return record


def update_memory(session: Session, record: Memory, payload: MemoryUpdate) -> Memory:
    record.content = payload.content
    record.cover_url = payload.cover_url
    record.is_public = payload.is_public
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info('memory {} updated by {}', record.id, record.user_id)
    return record


def delete_memory(session: Session, record: Memory) -> None:
    memory_id, user_id = record.id, record.user_id
    session.delete(record)
    session.commit()
    logger.info('memory {} deleted by {}', memory_id, user_id)
