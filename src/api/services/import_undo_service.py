# src/api/services/import_undo_service.py
"""
Undo for product imports, driven by the snapshot stored on
``ProductImportHistory.products``.

Only products and variants are removed. Brands, categories and their
product link rows stay as they are.
Deleting something that is already gone counts as done. Entries already
marked undone are skipped, their ids may belong to newer rows by now, and an
undone import is read-only, so every undo can be repeated safely.
"""
import copy
import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from src.api.core.utility import now_utc
from src.api.models.product_model import (
    Product,
    ProductImportHistory,
    UndoResult,
    Variant,
)

logger = logging.getLogger(__name__)


class ImportNotFoundError(LookupError):
    pass


class ImportTargetNotFoundError(LookupError):
    pass


class ImportUndoService:
    def __init__(self, session: Session):
        self.session = session

    def get_history(self, import_id: str) -> ProductImportHistory:
        history = self.session.exec(
            select(ProductImportHistory).where(ProductImportHistory.import_id == import_id)
        ).first()
        if not history:
            raise ImportNotFoundError(f"Import {import_id} not found")
        return history

    def delete_variant(self, variant_id: int) -> bool:
        variant = self.session.get(Variant, variant_id)
        if not variant:
            return False
        self.session.delete(variant)
        return True

    def delete_product(self, product_id: int) -> bool:
        product = self.session.get(Product, product_id)
        if not product:
            return False
        self.session.delete(product)
        return True

    def mark_import_undone(self, history: ProductImportHistory, actor_id: int):
        # first undo wins, repeats keep the first actor and time
        if history.is_undone:
            return
        history.is_undone = True
        history.undone_at = now_utc()
        history.undone_by = actor_id

    @staticmethod
    def entry_done(entry: Dict[str, Any]) -> bool:
        """A product entry is done once it was undone or every variant under it was"""
        if entry.get("is_undone"):
            return True
        variants = entry.get("variants", [])
        return bool(variants) and all(v.get("is_undone") for v in variants)

    def undo_product_entry(self, entry: Dict[str, Any], result: UndoResult):
        # ids in undone entries may already belong to newer rows
        if entry.get("is_undone"):
            return

        for variant_entry in entry.get("variants", []):
            if variant_entry.get("is_undone"):
                continue
            if self.delete_variant(variant_entry["variant_id"]):
                result.deleted_variants += 1
            variant_entry["is_undone"] = True
        # variants must be gone before the product row
        self.session.flush()

        if self.delete_product(entry["product_id"]):
            result.deleted_products += 1
        entry["is_undone"] = True

    def save(self, history: ProductImportHistory, products: List[Dict[str, Any]]):
        history.products = products
        self.session.add(history)
        self.session.commit()
        self.session.refresh(history)

    def undo_import(self, import_id: str, actor_id: int) -> UndoResult:
        history = self.get_history(import_id)
        if history.is_undone:
            logger.info("import %s already undone, nothing to do", import_id)
            return UndoResult(is_undone=True)

        products = copy.deepcopy(history.products or [])
        result = UndoResult()

        for entry in products:
            self.undo_product_entry(entry, result)

        self.mark_import_undone(history, actor_id)
        self.save(history, products)
        result.is_undone = history.is_undone

        logger.info(
            "import %s undone by user %s: %d products, %d variants deleted",
            import_id,
            actor_id,
            result.deleted_products,
            result.deleted_variants,
        )
        return result

    def undo_product(self, import_id: str, product_id: int, actor_id: int) -> UndoResult:
        history = self.get_history(import_id)
        products = copy.deepcopy(history.products or [])

        entry = self.find_product_entry(products, product_id)
        if entry is None:
            raise ImportTargetNotFoundError(f"Product {product_id} not found in this import")

        if history.is_undone or entry.get("is_undone"):
            return UndoResult(is_undone=history.is_undone)

        result = UndoResult()
        self.undo_product_entry(entry, result)

        if all(self.entry_done(p) for p in products):
            self.mark_import_undone(history, actor_id)
        self.save(history, products)
        result.is_undone = history.is_undone

        logger.info(
            "import %s: product %s undone by user %s (%d variants deleted)",
            import_id,
            product_id,
            actor_id,
            result.deleted_variants,
        )
        return result

    def undo_variant(self, import_id: str, variant_id: int, actor_id: int) -> UndoResult:
        history = self.get_history(import_id)
        products = copy.deepcopy(history.products or [])

        entry, variant_entry = self.find_variant_entry(products, variant_id)
        if variant_entry is None:
            raise ImportTargetNotFoundError(f"Variant {variant_id} not found in this import")

        if history.is_undone or entry.get("is_undone") or variant_entry.get("is_undone"):
            return UndoResult(is_undone=history.is_undone)

        result = UndoResult()
        if self.delete_variant(variant_id):
            result.deleted_variants += 1
        variant_entry["is_undone"] = True

        # drop the reference from the parent, the parent itself stays
        product = self.session.get(Product, entry["product_id"])
        if product and variant_id in (product.variants or []):
            product.variants = [v for v in product.variants if v != variant_id]
            product.updated_at = now_utc()
            self.session.add(product)

        if all(self.entry_done(p) for p in products):
            self.mark_import_undone(history, actor_id)
        self.save(history, products)
        result.is_undone = history.is_undone

        logger.info("import %s: variant %s undone by user %s", import_id, variant_id, actor_id)
        return result

    @staticmethod
    def find_product_entry(
        products: List[Dict[str, Any]], product_id: int
    ) -> Optional[Dict[str, Any]]:
        for entry in products:
            if str(entry.get("product_id")) == str(product_id):
                return entry
        return None

    @staticmethod
    def find_variant_entry(products: List[Dict[str, Any]], variant_id: int):
        for entry in products:
            for variant_entry in entry.get("variants", []):
                if str(variant_entry.get("variant_id")) == str(variant_id):
                    return entry, variant_entry
        return None, None
