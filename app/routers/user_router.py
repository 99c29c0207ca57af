from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.models.user_model import User
from app.schemas.user_schema import UserCreate, UserResponse, UserLogin, Token
from app.services.user_service import signup_user, login_user, get_current_user, get_my_info

router = APIRouter(prefix="/user", tags=["user"])

@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입 API",
    description="""
    이메일과 비밀번호로 계정을 생성하고, 생성된 사용자 정보를 반환합니다.
    """
)
def signup(data: UserCreate, db: Session = Depends(get_db)):
    return signup_user(db, data)

@router.post(
    "/login",
    response_model=Token,
    summary="로그인 API",
    description="""
    이메일과 비밀번호를 입력하면 JWT 토큰을 반환합니다.
    나의 선호 말투 조회(-mine) 시 이 토큰의 사용자 기준으로 집계됩니다.
    """
)
def login(data: UserLogin, db: Session = Depends(get_db)):
    return login_user(db, data)

@router.get(
    "/mypage",
    response_model=UserResponse,
    summary="마이페이지 조회 API",
)
def mypage(current_user: User = Depends(get_current_user)):
    return get_my_info(current_user)

