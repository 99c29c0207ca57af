from typing import List
from pydantic import BaseModel


class PlatformSatisfaction(BaseModel):
    company: str
    introduce_text_category: str
    introduce_text_category_count: int


class CategorySatisfaction(BaseModel):
    category: str
    introduce_text_category: str
    introduce_text_category_count: int


class PlatformDetailData(BaseModel):
    introduce_text_category: str
    introduce_text_category_count: int

    @classmethod
    def of(cls, introduce_text_category: str, introduce_text_category_count: int) -> "PlatformDetailData":
        return cls(
            introduce_text_category=introduce_text_category,
            introduce_text_category_count=introduce_text_category_count,
        )


class PlatformDetail(BaseModel):
    company: str
    data: List[PlatformDetailData]
