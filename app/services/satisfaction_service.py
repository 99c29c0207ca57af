import logging
from typing import Callable, Dict, Hashable, List, Optional, Sequence, TypeVar, Union
from sqlalchemy.orm import Session
from app.config.errors import NotExistKind
from app.db.product_db import (
    find_whole_platform_satisfaction,
    find_mine_platform_satisfaction,
    find_whole_category_satisfaction,
    find_mine_category_satisfaction,
)
from app.schemas.satisfaction_schema import (
    PlatformSatisfaction,
    CategorySatisfaction,
    PlatformDetail,
    PlatformDetailData,
)
from app.utils.enums import SatisfactionKind, get_all_company, get_all_introduce_text_category

logger = logging.getLogger(__name__)

T = TypeVar("T", PlatformSatisfaction, CategorySatisfaction)
GroupedData = Dict[str, List[PlatformDetailData]]


# --------------------------------------------------------------------------
# 조회 API에서 사용하는 함수
# --------------------------------------------------------------------------

def bring_platform_satisfaction(db: Session, user_id: int, kind: str) -> List[PlatformSatisfaction]:
    """전체 or 나의 플랫폼별 선호 말투 조회 (platform-whole / platform-mine)"""
    platform_satisfaction = fetch_satisfaction(db, user_id, _require_kind(kind, platform=True))
    return extract_most_platform(platform_satisfaction)

def bring_category_satisfaction(db: Session, user_id: int, kind: str) -> List[CategorySatisfaction]:
    """전체 or 나의 카테고리별 선호 말투 조회 (category-whole / category-mine)"""
    category_satisfaction = fetch_satisfaction(db, user_id, _require_kind(kind, platform=False))
    return extract_most_category(category_satisfaction)

def bring_platform_detail_satisfaction(db: Session, user_id: int, kind: str) -> List[PlatformDetail]:
    """전체 or 나의 플랫폼별 선호 말투 상세 조회. 기록이 없는 회사/말투 조합은 0으로 채운다."""
    platform_satisfaction = fetch_satisfaction(db, user_id, _require_kind(kind, platform=True))
    return mapping_platform_detail_data(platform_satisfaction)


def _require_kind(kind: str, platform: bool) -> SatisfactionKind:
    satisfaction_kind = SatisfactionKind.from_kind(kind)
    if satisfaction_kind.is_platform != platform:
        logger.warning(f"Kind '{kind}' is not allowed here (platform={platform}).")
        raise NotExistKind(kind)
    return satisfaction_kind


# --------------------------------------------------------------------------
# 종류(kind)에 따른 조회 분기
# --------------------------------------------------------------------------

def fetch_satisfaction(
    db: Session, user_id: int, kind: Union[str, SatisfactionKind]
) -> Union[List[PlatformSatisfaction], List[CategorySatisfaction]]:
    """
    종류에 따라 알맞은 집계 쿼리를 호출합니다.
    -mine 은 user_id 기준으로, -whole 은 전체 사용자 기준으로 조회합니다.
    지원하지 않는 종류는 조회 없이 NotExistKind 를 발생시킵니다.
    """
    try:
        satisfaction_kind = SatisfactionKind.from_kind(kind)
    except NotExistKind:
        logger.warning(f"Unknown satisfaction kind requested: '{kind}'")
        raise

    logger.info(f"Fetching satisfaction: kind={satisfaction_kind.value}, user_id={user_id}")

    if satisfaction_kind is SatisfactionKind.PLATFORM_WHOLE:
        return find_whole_platform_satisfaction(db)
    if satisfaction_kind is SatisfactionKind.PLATFORM_MINE:
        return find_mine_platform_satisfaction(db, user_id)
    if satisfaction_kind is SatisfactionKind.CATEGORY_WHOLE:
        return find_whole_category_satisfaction(db)
    return find_mine_category_satisfaction(db, user_id)


# --------------------------------------------------------------------------
# 그룹별 최다 선호 말투 선별
# --------------------------------------------------------------------------

def select_top_per_group(records: Sequence[T], key: Callable[[T], Hashable]) -> List[T]:
    # 동점이면 먼저 나온 레코드를 유지, 더 큰 값으로 교체되면 해당 그룹은 맨 뒤로 이동
    best: Dict[Hashable, T] = {}
    for record in records:
        group = key(record)
        current = best.get(group)
        if current is None or current.introduce_text_category_count < record.introduce_text_category_count:
            best.pop(group, None)
            best[group] = record
    return list(best.values())

def extract_most_platform(platform_satisfaction: Sequence[PlatformSatisfaction]) -> List[PlatformSatisfaction]:
    return select_top_per_group(platform_satisfaction, key=lambda item: item.company)

def extract_most_category(category_satisfaction: Sequence[CategorySatisfaction]) -> List[CategorySatisfaction]:
    return select_top_per_group(category_satisfaction, key=lambda item: item.category)


# --------------------------------------------------------------------------
# 플랫폼 상세 데이터 (회사 x 말투 전체 매트릭스)
# --------------------------------------------------------------------------

def mapping_platform_detail_data(
    platform_satisfaction: Sequence[PlatformSatisfaction],
    all_companies: Optional[List[str]] = None,
    all_categories: Optional[List[str]] = None,
) -> List[PlatformDetail]:
    if all_companies is None:
        all_companies = get_all_company()
    if all_categories is None:
        all_categories = get_all_introduce_text_category()

    grouped_data = group_by_company(platform_satisfaction)
    checked_grouped_data = check_existence(all_companies, all_categories, grouped_data)

    result = [
        PlatformDetail(company=company, data=data)
        for company, data in checked_grouped_data.items()
    ]
    logger.debug(f"Built platform detail for {len(result)} companies.")
    return result

def group_by_company(platform_satisfaction: Sequence[PlatformSatisfaction]) -> GroupedData:
    """회사 기준으로 (말투, 개수)를 묶습니다. 같은 조합이 중복되어도 그대로 둡니다."""
    grouped_data: GroupedData = {}
    for item in platform_satisfaction:
        grouped_data.setdefault(item.company, []).append(
            PlatformDetailData.of(item.introduce_text_category, item.introduce_text_category_count)
        )
    return grouped_data

def check_existence(all_companies: List[str], all_categories: List[str], grouped_data: GroupedData) -> GroupedData:
    """
    등록되지 않은 회사는 빈 목록으로 추가하고,
    각 회사에 없는 말투는 개수 0으로 채웁니다.
    """
    for company in all_companies:
        grouped_data.setdefault(company, [])

    for company, data in grouped_data.items():
        existing_categories = {d.introduce_text_category for d in data}
        for category in all_categories:
            if category not in existing_categories:
                data.append(PlatformDetailData.of(category, 0))
    return grouped_data
