from typing import Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

_FALSE_STRINGS = {'', '0', 'false', 'f', 'no', 'n', 'off'}


def coerce_flag(value: Any) -> bool:
    """Loosely interpret form and query style values as a boolean.

    ``None`` and the usual "off" spellings are false, any other string or
    non-zero number is true. Containers are rejected.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    raise ValueError('isPublic must be a boolean')


class MemoryBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    cover_url: str = Field(alias='coverUrl')
    is_public: bool = Field(default=False, alias='isPublic')

    @field_validator('is_public', mode='before')
    @classmethod
    def coerce_is_public(cls, value: Any) -> bool:
        return coerce_flag(value)


class MemoryCreate(MemoryBase):
    pass


class MemoryUpdate(MemoryBase):
    pass


class MemoryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str
    cover_url: str = Field(alias='coverUrl')
    is_public: bool = Field(alias='isPublic')
    user_id: str = Field(alias='userId')
    created_at: datetime = Field(alias='createdAt')


class MemorySummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    cover_url: str = Field(alias='coverUrl')
    excerpt: str
