from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.config.errors import ErrorMessages, NotExistKind
from app.models.user_model import User
from app.schemas.satisfaction_schema import PlatformSatisfaction, CategorySatisfaction, PlatformDetail
from app.services.user_service import get_current_user
from app.services.satisfaction_service import (
    bring_platform_satisfaction,
    bring_category_satisfaction,
    bring_platform_detail_satisfaction,
)

router = APIRouter(prefix="/satisfaction", tags=["satisfaction"])

@router.get(
    "/platform/detail/{kind}",
    response_model=List[PlatformDetail],
    summary="플랫폼별 선호 말투 상세 조회 API",
    description="""
    회사별로 모든 말투의 만족 개수를 조회합니다. 기록이 없는 말투는 0으로 채워집니다.
    kind: platform-whole(전체) 또는 platform-mine(나의)
    """
)
def platform_detail_satisfaction(
    kind: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return bring_platform_detail_satisfaction(db, current_user.id, kind)
    except NotExistKind:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ErrorMessages.NOT_EXIST_KIND)

@router.get(
    "/platform/{kind}",
    response_model=List[PlatformSatisfaction],
    summary="플랫폼별 선호 말투 조회 API",
    description="""
    회사별로 가장 많이 만족한 말투를 조회합니다.
    kind: platform-whole(전체) 또는 platform-mine(나의)
    """
)
def platform_satisfaction(
    kind: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return bring_platform_satisfaction(db, current_user.id, kind)
    except NotExistKind:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ErrorMessages.NOT_EXIST_KIND)

@router.get(
    "/category/{kind}",
    response_model=List[CategorySatisfaction],
    summary="카테고리별 선호 말투 조회 API",
    description="""
    상품 카테고리별로 가장 많이 만족한 말투를 조회합니다.
    kind: category-whole(전체) 또는 category-mine(나의)
    """
)
def category_satisfaction(
    kind: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return bring_category_satisfaction(db, current_user.id, kind)
    except NotExistKind:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ErrorMessages.NOT_EXIST_KIND)
