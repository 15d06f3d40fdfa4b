from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class IdentityOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sub: str
    name: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, alias='avatarUrl')
