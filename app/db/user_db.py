from sqlalchemy.orm import Session
from passlib.context import CryptContext
from app.models.user_model import User
from app.schemas.user_schema import UserCreate

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# 회원가입
def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate):
    hashed_pw = pwd_context.hash(user.password)
    db_user = User(
        email=user.email,
        hashed_password=hashed_pw,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

# 마이페이지
def get_user_by_id(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()
