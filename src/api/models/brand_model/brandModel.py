# src/api/models/brand_model/brandModel.py
from typing import Literal, Optional
from sqlmodel import Field
from src.api.models.baseModel import TimeStampedModel


class Brand(TimeStampedModel, table=True):
    __tablename__: Literal["brands"] = "brands"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191, index=True)
    description: Optional[str] = None
    is_active: bool = Field(default=True)
