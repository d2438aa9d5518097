from core.database import SessionLocal
from typing import Annotated
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from starlette import status
from core.config import settings
from core.exceptions import Forbidden
from models.users import Role

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

db_dependency = Annotated[Session, Depends(get_db)]


def get_current_user(token: Annotated[str, Depends(OAuth2PasswordBearer(tokenUrl="auth/token"))]):
    """
    Decode the bearer access token into the request principal.

    Tokens are issued by the auth service; only their claims matter here.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        email: str = payload.get("sub")
        user_id: int = payload.get("id")
        token_type: str = payload.get("type")

        if email is None or user_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                                detail="Could not validate credentials.")

        if token_type != "access":
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                                detail="Invalid token type. Access token required.")

        user_role = Role(payload.get("role"))

        return {"email": email, "user_id": user_id, "user_role": user_role}

    except (JWTError, ValueError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="Could not validate credentials.")


user_dependency = Annotated[dict, Depends(get_current_user)]


def is_admin(user: dict) -> bool:
    match user.get("user_role"):
        case Role.ADMIN:
            return True
        case Role.CUSTOMER:
            return False
        case other:
            raise ValueError(f"Unknown role: {other!r}")


def get_current_admin(user: user_dependency):
    if not is_admin(user):
        raise Forbidden("Admin privileges required")
    return user


admin_dependency = Annotated[dict, Depends(get_current_admin)]
