# votehub/api/deps.py
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from votehub.database import get_db
from votehub.models.user import User
from votehub.core.errors import AuthenticationError
from votehub.core.security import decode_access_token

# JWT Bearer 토큰 스킴 (헤더 없을 때도 401로 통일)
security = HTTPBearer(auto_error=False)

def get_current_user(
    token: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """JWT 토큰으로 현재 유저 가져오기"""
    if token is None:
        raise AuthenticationError("인증이 필요합니다")

    payload = decode_access_token(token.credentials)
    if payload is None:
        raise AuthenticationError("인증 정보가 올바르지 않습니다")

    username = payload.get("sub")
    if username is None:
        raise AuthenticationError("인증 정보가 올바르지 않습니다")

    # DB에서 유저 조회
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise AuthenticationError("인증 정보가 올바르지 않습니다")

    return user
