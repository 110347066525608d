import logging
import uuid
from typing import Dict

from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlmodel import Session

from certifytrack.configs import settings
from certifytrack.configs.database import get_db
from certifytrack.models import User, UserRole
from certifytrack.schemas.user_schema import CurrentUser

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# tokens are issued by the hosted auth service, this app only verifies them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=settings.AUTH_TOKEN_URL)

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


def decode_access_token(token: str) -> Dict:
    try:
        return jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning("Rejected access token: %s", e)
        raise credentials_exception


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> CurrentUser:
    payload = decode_access_token(token)
    try:
        user_id = uuid.UUID(payload.get("sub") or "")
    except ValueError:
        raise credentials_exception

    # the role lives on the application profile, not in the token
    profile = db.get(User, user_id)
    return CurrentUser(
        id=user_id,
        email=payload.get("email"),
        role=profile.role if profile else None,
    )


def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if current_user.role != UserRole.admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
    return current_user
