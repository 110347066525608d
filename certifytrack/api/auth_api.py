from fastapi import APIRouter, Depends

from certifytrack.auth.auth_handler import get_current_user
from certifytrack.schemas.user_schema import CurrentUser

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/me", response_model=CurrentUser)
def read_current_user(current_user: CurrentUser = Depends(get_current_user)):
    return current_user
