from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from app.core.config import Settings, get_settings
from app.db.session import get_session
from app.models.memory import Memory
from app.schemas.memory import MemoryCreate, MemoryOut, MemorySummary, MemoryUpdate
from app.services.auth_service import Identity, get_current_identity
from app.services.memory_service import (
    can_read,
    create_memory,
    delete_memory,
    get_memory,
    is_owner,
    list_memories,
    make_excerpt,
    update_memory,
)

router = APIRouter(
    prefix='/memories',
    tags=['memories'],
    dependencies=[Depends(get_current_identity)],
)


def _to_memory_out(record: Memory) -> MemoryOut:
    return MemoryOut(
        id=record.id,
        content=record.content,
        cover_url=record.cover_url,
        is_public=record.is_public,
        user_id=record.user_id,
        created_at=record.created_at,
    )


def _get_or_404(session: Session, memory_id: UUID) -> Memory:
    record = get_memory(session, str(memory_id))
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Memory not found')
    return record


def _ensure_owner(record: Memory, identity: Identity) -> None:
    if not is_owner(record, identity.sub):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail='Not allowed')


@router.get('', response_model=list[MemorySummary])
def list_memories_endpoint(
    session: Session = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
    config: Settings = Depends(get_settings),
) -> list[MemorySummary]:
    return [
        MemorySummary(
            id=record.id,
            cover_url=record.cover_url,
            excerpt=make_excerpt(record.content, config.MEMORY_EXCERPT_LENGTH),
        )
        for record in list_memories(session, identity.sub)
    ]


@router.get('/{memory_id}', response_model=MemoryOut)
def get_memory_endpoint(
    memory_id: UUID,
    session: Session = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> MemoryOut:
    record = _get_or_404(session, memory_id)
    if not can_read(record, identity.sub):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail='Not allowed')
    return _to_memory_out(record)


@router.post('', response_model=MemoryOut, status_code=status.HTTP_201_CREATED)
def create_memory_endpoint(
    payload: MemoryCreate,
    session: Session = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> MemoryOut:
    record = create_memory(session, identity.sub, payload)
    return _to_memory_out(record)


@router.put('/{memory_id}', response_model=MemoryOut)
def update_memory_endpoint(
    memory_id: UUID,
    payload: MemoryUpdate,
    session: Session = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> MemoryOut:
    record = _get_or_404(session, memory_id)
    _ensure_owner(record, identity)
    record = update_memory(session, record, payload)
    return _to_memory_out(record)


@router.delete('/{memory_id}', status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_memory_endpoint(
    memory_id: UUID,
    session: Session = Depends(get_session),
    identity: Identity = Depends(get_current_identity),
) -> Response:
    record = _get_or_404(session, memory_id)
    _ensure_owner(record, identity)
    delete_memory(session, record)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
