# src/api/models/category_model/categoryModel.py
from typing import Literal, Optional
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class Category(TimeStampedModel, table=True):
    __tablename__: Literal["categories"] = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191, index=True)
    slug: str = Field(max_length=191, index=True)
    description: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, foreign_key="categories.id")
    is_active: bool = Field(default=True)
