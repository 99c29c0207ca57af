from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from app.utils.enums import Company, ProductCategory, IntroduceTextCategory


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    company: Company
    category: ProductCategory
    introduce_text: Optional[str] = None
    introduce_text_category: IntroduceTextCategory


class SatisfactionUpdate(BaseModel):
    satisfaction: bool


class ProductResponse(BaseModel):
    id: int
    name: str
    company: str
    category: str
    introduce_text: Optional[str] = None
    introduce_text_category: str
    satisfaction: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
