# dependencies.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from skillbloom.database import get_db
from skillbloom.models.user import User
from skillbloom.schemas.user import TokenData
from skillbloom.services.ai_client import SkillCollaborator
from skillbloom.services.errors import (
    CollaboratorError,
    CollaboratorTimeoutError,
    NotFoundError,
    PermissionDeniedError,
    SkillBloomError,
    ValidationError,
)
from skillbloom.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_homemaker(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "homemaker":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Homemaker account required")
    return current_user


def get_collaborator(request: Request) -> SkillCollaborator:
    collaborator = getattr(request.app.state, "ai_client", None)
    if collaborator is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="AI service is not configured")
    return collaborator


def to_http_error(exc: SkillBloomError) -> HTTPException:
    """Map a service-layer error onto the HTTP status the API promises."""

    if isinstance(exc, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, CollaboratorTimeoutError):
        code = status.HTTP_504_GATEWAY_TIMEOUT
    elif isinstance(exc, CollaboratorError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = {"message": exc.message, **exc.detail}
    return HTTPException(status_code=code, detail=detail)
