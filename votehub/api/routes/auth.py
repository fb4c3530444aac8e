# votehub/api/routes/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from datetime import timedelta

from votehub.database import get_db
from votehub.models.user import User
from votehub.schemas.common import ApiResponse
from votehub.schemas.user import UserCreate, UserLogin, UserResponse, Token
from votehub.core.errors import AuthenticationError, ConflictError
from votehub.core.logger import logger
from votehub.core.security import hash_password, verify_password, create_access_token
from votehub.api.deps import get_current_user
from votehub.config import settings

router = APIRouter(prefix="/api/auth", tags=["인증"])

def _issue_token(user: User) -> dict:
    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(
        data={"sub": user.username, "user_id": user.id},
        expires_delta=access_token_expires
    )
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": settings.access_token_expire_minutes * 60,
        "user": user
    }

@router.post("/register", response_model=ApiResponse[Token], status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """회원가입"""
    # 아이디 중복 체크
    existing_user = db.query(User).filter(User.username == user_data.username).first()
    if existing_user:
        raise ConflictError("이미 사용 중인 아이디입니다")

    new_user = User(
        username=user_data.username,
        email=user_data.email,
        hashed_password=hash_password(user_data.password)
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"회원가입: {new_user.username}")
    return {"success": True, "message": "회원가입 완료", "data": _issue_token(new_user)}

@router.post("/login", response_model=ApiResponse[Token])
def login(user_data: UserLogin, db: Session = Depends(get_db)):
    """로그인"""
    user = db.query(User).filter(User.username == user_data.username).first()

    # 비밀번호 검증
    if not user or not verify_password(user_data.password, user.hashed_password):
        raise AuthenticationError("아이디 또는 비밀번호가 올바르지 않습니다")

    return {"success": True, "message": "로그인 성공", "data": _issue_token(user)}

@router.get("/me", response_model=ApiResponse[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    """내 정보"""
    return {"success": True, "data": current_user}
