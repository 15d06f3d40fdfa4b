from fastapi import APIRouter, Depends

from app.schemas.user import IdentityOut
from app.services.auth_service import Identity, get_current_identity

router = APIRouter(prefix='/me', tags=['me'])


@router.get('', response_model=IdentityOut)
def get_me(identity: Identity = Depends(get_current_identity)) -> IdentityOut:
    return IdentityOut(sub=identity.sub, name=identity.name, avatar_url=identity.avatar_url)
