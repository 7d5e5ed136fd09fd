# src/api/models/product_model/importHistoryModel.py
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any


class ProductImportHistory(SQLModel, table=True):
    __tablename__ = "product_import_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    import_id: str = Field(max_length=64, index=True, unique=True)
    file_name: str
    imported_by: int = Field(index=True)
    imported_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_rows: int = 0
    products_created: int = 0
    variants_created: int = 0
    success_count: int = 0
    error_count: int = 0
    error_details: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    # snapshot of every product/variant this import wrote, drives undo
    products: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    is_undone: bool = Field(default=False, index=True)
    undone_at: Optional[datetime] = None
    undone_by: Optional[int] = None


class ImportedVariant(SQLModel):
    variant_id: int
    variant_sku: str
    variant_label: Optional[str] = None
    created: bool = False
    is_undone: bool = False


class ImportedProduct(SQLModel):
    product_id: int
    product_name: str
    product_slug: str
    created: bool = False
    is_undone: bool = False
    variants: List[ImportedVariant] = []


class ImportResult(SQLModel):
    """Running tally of one import, filled in group by group"""

    total_processed: int = 0
    products_created: int = 0
    variants_created: int = 0
    success: int = 0
    errors: int = 0
    error_details: List[str] = []
    imported_products: List[ImportedProduct] = []

    def add_error(self, message: str):
        self.errors += 1
        self.error_details.append(message)

    def summary(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"imported_products"})


class UndoRequest(SQLModel):
    import_id: str
    product_id: Optional[int] = None
    variant_id: Optional[int] = None


class UndoResult(SQLModel):
    deleted_products: int = 0
    deleted_variants: int = 0
    is_undone: bool = False


class ImportHistoryRead(SQLModel):
    id: int
    import_id: str
    file_name: str
    imported_by: int
    imported_at: datetime
    total_rows: int
    products_created: int
    variants_created: int
    success_count: int
    error_count: int
    error_details: List[str] = []
    products: List[Dict[str, Any]] = []
    is_undone: bool
    undone_at: Optional[datetime] = None
    undone_by: Optional[int] = None
