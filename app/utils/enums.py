from enum import Enum
from typing import List
from app.config.errors import NotExistKind


class Company(str, Enum):
    COUPANG = "쿠팡"
    ALI = "알리"
    GMARKET = "G마켓"
    ELEVENST = "11번가"
    TEMU = "테무"


class ProductCategory(str, Enum):
    FASHION = "패션"
    BEAUTY = "뷰티"
    FOOD = "식품"
    DIGITAL = "가전/디지털"
    LIVING = "생활용품"
    SPORTS = "스포츠/레저"


class IntroduceTextCategory(str, Enum):
    """상품 소개글의 말투 분류"""
    FRIENDLY = "친근한"
    PROFESSIONAL = "전문적인"
    EMOTIONAL = "감성적인"
    HUMOROUS = "유머러스한"
    CONCISE = "간결한"


class SatisfactionKind(str, Enum):
    PLATFORM_WHOLE = "platform-whole"
    PLATFORM_MINE = "platform-mine"
    CATEGORY_WHOLE = "category-whole"
    CATEGORY_MINE = "category-mine"

    @classmethod
    def from_kind(cls, kind: str) -> "SatisfactionKind":
        try:
            return cls(kind)
        except ValueError:
            raise NotExistKind(kind) from None

    @property
    def is_platform(self) -> bool:
        return self in (SatisfactionKind.PLATFORM_WHOLE, SatisfactionKind.PLATFORM_MINE)


def get_all_company() -> List[str]:
    return [company.value for company in Company]

def get_all_introduce_text_category() -> List[str]:
    return [category.value for category in IntroduceTextCategory]
