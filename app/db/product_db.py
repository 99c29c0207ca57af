from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.product_model import Product
from app.schemas.product_schema import ProductCreate
from app.schemas.satisfaction_schema import PlatformSatisfaction, CategorySatisfaction

# 상품 등록 / 조회
def create_product(db: Session, user_id: int, data: ProductCreate) -> Product:
    db_product = Product(
        user_id=user_id,
        name=data.name,
        company=data.company.value,
        category=data.category.value,
        introduce_text=data.introduce_text,
        introduce_text_category=data.introduce_text_category.value,
    )
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

def get_product_by_id(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()

def get_products_by_user(db: Session, user_id: int) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.user_id == user_id)
        .order_by(Product.id.desc())
        .all()
    )


# 선호 말투 집계
def _platform_satisfaction_query(db: Session):
    count = func.count(Product.id)
    return (
        db.query(
            Product.company.label("company"),
            Product.introduce_text_category.label("introduce_text_category"),
            count.label("introduce_text_category_count"),
        )
        .filter(Product.satisfaction.is_(True))
        .group_by(Product.company, Product.introduce_text_category)
        .order_by(Product.company, Product.introduce_text_category)
    )

def _category_satisfaction_query(db: Session):
    count = func.count(Product.id)
    return (
        db.query(
            Product.category.label("category"),
            Product.introduce_text_category.label("introduce_text_category"),
            count.label("introduce_text_category_count"),
        )
        .filter(Product.satisfaction.is_(True))
        .group_by(Product.category, Product.introduce_text_category)
        .order_by(Product.category, Product.introduce_text_category)
    )

def _to_platform_satisfaction(row) -> PlatformSatisfaction:
    return PlatformSatisfaction(
        company=row.company,
        introduce_text_category=row.introduce_text_category,
        introduce_text_category_count=row.introduce_text_category_count,
    )

def _to_category_satisfaction(row) -> CategorySatisfaction:
    return CategorySatisfaction(
        category=row.category,
        introduce_text_category=row.introduce_text_category,
        introduce_text_category_count=row.introduce_text_category_count,
    )

def find_whole_platform_satisfaction(db: Session) -> List[PlatformSatisfaction]:
    rows = _platform_satisfaction_query(db).all()
    return [_to_platform_satisfaction(row) for row in rows]

def find_mine_platform_satisfaction(db: Session, user_id: int) -> List[PlatformSatisfaction]:
    rows = _platform_satisfaction_query(db).filter(Product.user_id == user_id).all()
    return [_to_platform_satisfaction(row) for row in rows]

def find_whole_category_satisfaction(db: Session) -> List[CategorySatisfaction]:
    rows = _category_satisfaction_query(db).all()
    return [_to_category_satisfaction(row) for row in rows]

def find_mine_category_satisfaction(db: Session, user_id: int) -> List[CategorySatisfaction]:
    rows = _category_satisfaction_query(db).filter(Product.user_id == user_id).all()
    return [_to_category_satisfaction(row) for row in rows]
