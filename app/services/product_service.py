import logging
from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.config.errors import ErrorMessages
from app.db.product_db import create_product, get_product_by_id, get_products_by_user
from app.models.user_model import User
from app.schemas.product_schema import ProductCreate, ProductResponse, SatisfactionUpdate

logger = logging.getLogger(__name__)

# 상품 등록
def register_product(db: Session, current_user: User, data: ProductCreate) -> ProductResponse:
    product = create_product(db, current_user.id, data)
    logger.info(f"Product {product.id} registered by user {current_user.id}.")
    return ProductResponse.model_validate(product)

# 나의 상품 목록
def get_my_products(db: Session, current_user: User) -> List[ProductResponse]:
    return [ProductResponse.model_validate(p) for p in get_products_by_user(db, current_user.id)]

# 소개글 만족 여부 수정
def update_satisfaction(
    db: Session,
    current_user: User,
    product_id: int,
    data: SatisfactionUpdate
) -> ProductResponse:
    product = get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ErrorMessages.PRODUCT_NOT_FOUND)
    if product.user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ErrorMessages.PRODUCT_FORBIDDEN)

    product.satisfaction = data.satisfaction
    db.commit()
    db.refresh(product)
    return ProductResponse.model_validate(product)
