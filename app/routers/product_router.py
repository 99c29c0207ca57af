from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.models.user_model import User
from app.schemas.product_schema import ProductCreate, ProductResponse, SatisfactionUpdate
from app.services.user_service import get_current_user
from app.services.product_service import register_product, get_my_products, update_satisfaction

router = APIRouter(prefix="/products", tags=["product"])

@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="상품 등록 API",
    description="""
    상품 정보와 소개글, 소개글 말투를 등록합니다.
    """
)
def create(
    data: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return register_product(db, current_user, data)

@router.get(
    "/mine",
    response_model=List[ProductResponse],
    summary="나의 상품 목록 조회 API",
)
def my_products(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return get_my_products(db, current_user)

@router.patch(
    "/{product_id}/satisfaction",
    response_model=ProductResponse,
    summary="소개글 만족 여부 수정 API",
    description="""
    본인이 등록한 상품의 소개글 만족 여부를 수정합니다.
    만족한 상품만 선호 말투 통계에 집계됩니다.
    """
)
def change_satisfaction(
    product_id: int,
    data: SatisfactionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return update_satisfaction(db, current_user, product_id, data)
