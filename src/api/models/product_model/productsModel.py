# src/api/models/product_model/productsModel.py
from typing import Literal, Optional, List
from sqlalchemy import Column, JSON
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class Product(TimeStampedModel, table=True):
    __tablename__: Literal["products"] = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191)
    slug: str = Field(max_length=191, index=True, unique=True)
    description: Optional[str] = None
    ingredients: Optional[str] = None
    price: float = Field(default=0)
    discount: float = Field(default=0)  # percentage
    stock: float = Field(default=0)

    # visibility / marketing flags
    is_active: bool = Field(default=False)
    is_out_of_stock: bool = Field(default=False)
    is_featured: bool = Field(default=False)
    is_top_selling: bool = Field(default=False)
    is_new_arrival: bool = Field(default=False)
    is_best_selling: bool = Field(default=False)
    is_special: bool = Field(default=False)
    is_grocery: bool = Field(default=False)

    brand_id: Optional[int] = Field(default=None, foreign_key="brands.id")
    # reference lists, ids only
    categories: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    variants: List[int] = Field(default_factory=list, sa_column=Column(JSON))

    # aggregates maintained by reviews, never written by imports
    reviews: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    rating_avg: float = Field(default=0)
    review_count: int = Field(default=0)
