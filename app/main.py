import logging
from fastapi import FastAPI
from app.routers import user_router, product_router, satisfaction_router
from app.config.database import Base, engine
# 테이블 등록
from app.models import user_model, product_model  # noqa: F401

logging.basicConfig(level=logging.INFO)

app = FastAPI()

# DB 테이블 생성
Base.metadata.create_all(bind=engine)

# 라우터 등록
app.include_router(user_router.router)
app.include_router(product_router.router)
app.include_router(satisfaction_router.router)
