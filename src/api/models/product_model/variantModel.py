# src/api/models/product_model/variantModel.py
from typing import Literal, Optional, List
from sqlalchemy import Column, JSON
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class Variant(TimeStampedModel, table=True):
    __tablename__: Literal["variants"] = "variants"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="products.id", index=True, ondelete="CASCADE")
    sku: str = Field(max_length=191, index=True, unique=True)
    label: Optional[str] = Field(default=None, max_length=191)  # "500g", "1kg"
    slug: Optional[str] = Field(default=None, max_length=191)
    price: float = Field(default=0)
    discount: float = Field(default=0)
    stock: float = Field(default=0)
    # managed from the product screen, imports leave it alone
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=False)
    is_out_of_stock: bool = Field(default=False)
