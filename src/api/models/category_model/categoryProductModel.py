# src/api/models/category_model/categoryProductModel.py
from typing import Literal, Optional, List
from sqlalchemy import Column, JSON
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class CategoryProducts(TimeStampedModel, table=True):
    __tablename__: Literal["category_products"] = "category_products"

    id: Optional[int] = Field(default=None, primary_key=True)
    category_id: int = Field(foreign_key="categories.id", unique=True)
    products: List[int] = Field(default_factory=list, sa_column=Column(JSON))
