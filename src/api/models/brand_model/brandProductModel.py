# src/api/models/brand_model/brandProductModel.py
from typing import Literal, Optional, List
from sqlalchemy import Column, JSON
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class BrandProducts(TimeStampedModel, table=True):
    __tablename__: Literal["brand_products"] = "brand_products"

    id: Optional[int] = Field(default=None, primary_key=True)
    brand_id: int = Field(foreign_key="brands.id", unique=True)
    products: List[int] = Field(default_factory=list, sa_column=Column(JSON))
