# src/api/services/product_import_service.py
"""
CSV/Excel product import.

Rows are grouped into products by ``(Product Name, Slug)``, every group is
reconciled against the catalogue (update by slug / SKU, create otherwise) and
one ``ProductImportHistory`` row is written at the end so the import can be
undone later.

Each group and each variant row is committed on its own. A failure rolls back
only the unit that failed, gets recorded in the result and the import moves
on; nothing here wraps the whole feed in one transaction.
"""
import logging
import random
import uuid
from typing import Dict, List, Optional, Tuple

from sqlmodel import Session, select

from src.api.core.product_images import pick_product_images
from src.api.core.utility import category_slug, now_utc, split_list
from src.api.models.brand_model import Brand, BrandProducts
from src.api.models.category_model import Category, CategoryProducts
from src.api.models.product_model import (
    ImportedProduct,
    ImportedVariant,
    ImportResult,
    Product,
    ProductImportHistory,
    Variant,
)

logger = logging.getLogger(__name__)

Row = Dict[str, str]


def as_bool(value: Optional[str]) -> bool:
    return value == "true"


def as_number(value: Optional[str]) -> float:
    return float(value or 0)


def group_rows(rows: List[Row]) -> Dict[Tuple[str, str], List[Row]]:
    """
    Group rows by product name AND slug, in first-seen order.
    Two rows sharing a slug under different names end up in different groups.
    """
    groups: Dict[Tuple[str, str], List[Row]] = {}
    for row in rows:
        key = (row.get("Product Name", ""), row.get("Slug", ""))
        groups.setdefault(key, []).append(row)
    return groups


class ProductImportService:
    def __init__(self, session: Session, import_id: str = None):
        self.session = session
        self.import_id = import_id or str(uuid.uuid4())

    def resolve_brand(self, brand_name: str) -> Brand:
        """Find brand by exact name, create it when missing"""
        brand = self.session.exec(select(Brand).where(Brand.name == brand_name)).first()
        if brand:
            return brand

        brand = Brand(
            name=brand_name,
            description=f"{brand_name} brand",
            is_active=True,
        )
        self.session.add(brand)
        self.session.commit()
        self.session.refresh(brand)
        logger.info("created brand %r (id=%s)", brand.name, brand.id)
        return brand

    def resolve_category(self, category_name: str) -> Category:
        """Find category by exact (trimmed) name, create it when missing"""
        name = category_name.strip()
        category = self.session.exec(select(Category).where(Category.name == name)).first()
        if category:
            return category

        category = Category(
            name=name,
            slug=category_slug(name),
            description=f"{name} category",
            is_active=True,
        )
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        logger.info("created category %r (id=%s)", category.name, category.id)
        return category

    def resolve_categories(self, category_names: List[str]) -> List[Category]:
        return [self.resolve_category(name) for name in category_names]

    def apply_product_fields(
        self,
        product: Product,
        row: Row,
        brand: Brand,
        categories: List[Category],
        images: List[str],
    ):
        # full overwrite: every mapped field is reassigned, blanks included
        product.name = row["Product Name"]
        product.description = row["Description"]
        product.ingredients = row.get("Ingredients") or ""
        product.price = as_number(row["Price"])
        product.discount = as_number(row["Discount (%)"])
        product.is_active = as_bool(row["Active"])
        product.is_out_of_stock = as_bool(row["Out of Stock"])
        product.is_featured = as_bool(row["Featured"])
        product.is_top_selling = as_bool(row["Top Selling"])
        product.is_new_arrival = as_bool(row["New Arrival"])
        product.is_best_selling = as_bool(row["Best Selling"])
        product.is_special = as_bool(row["Special"])
        product.is_grocery = as_bool(row.get("Grocery"))
        product.brand_id = brand.id
        product.categories = [category.id for category in categories]
        product.images = images

    def upsert_product(
        self,
        row: Row,
        brand: Brand,
        categories: List[Category],
        images: List[str],
    ) -> Tuple[Product, bool]:
        product = self.session.exec(select(Product).where(Product.slug == row["Slug"])).first()
        created = product is None

        if created:
            product = Product(
                slug=row["Slug"],
                variants=[],
                reviews=[],
                rating_avg=0,
                review_count=0,
                stock=0,
            )
        else:
            product.updated_at = now_utc()

        self.apply_product_fields(product, row, brand, categories, images)

        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product, created

    def upsert_variant(self, product: Product, row: Row) -> Tuple[Variant, bool]:
        variant = self.session.exec(
            select(Variant).where(Variant.sku == row["Variant SKU"])
        ).first()
        created = variant is None

        if created:
            variant = Variant(
                product_id=product.id,
                sku=row["Variant SKU"],
                images=[],
            )
        else:
            variant.updated_at = now_utc()

        variant.label = row["Variant Label"]
        variant.slug = row["Variant Slug"]
        variant.price = as_number(row["Variant Price"])
        variant.discount = as_number(row["Variant Discount (%)"])
        variant.stock = as_number(row["Variant Stock"])
        variant.is_active = as_bool(row["Variant Active"])
        variant.is_out_of_stock = as_bool(row["Variant Out of Stock"])

        self.session.add(variant)
        self.session.commit()
        self.session.refresh(variant)
        return variant, created

    def link_brand_product(self, brand_id: int, product_id: int):
        link = self.session.exec(
            select(BrandProducts).where(BrandProducts.brand_id == brand_id)
        ).first()
        if not link:
            link = BrandProducts(brand_id=brand_id, products=[])

        if product_id not in (link.products or []):
            link.products = [*(link.products or []), product_id]
        link.updated_at = now_utc()
        self.session.add(link)
        self.session.commit()

    def link_category_product(self, category_id: int, product_id: int):
        link = self.session.exec(
            select(CategoryProducts).where(CategoryProducts.category_id == category_id)
        ).first()
        if not link:
            link = CategoryProducts(category_id=category_id, products=[])

        if product_id not in (link.products or []):
            link.products = [*(link.products or []), product_id]
        link.updated_at = now_utc()
        self.session.add(link)
        self.session.commit()

    def import_group(self, rows: List[Row], result: ImportResult):
        first_row = rows[0]
        product_name = first_row.get("Product Name", "")

        try:
            brand = self.resolve_brand(first_row["Brand"])

            category_names = split_list(first_row["Categories"])
            categories = self.resolve_categories(category_names)

            images = pick_product_images(
                category_names[0] if category_names else "",
                first_row.get("Images"),
                # seeded by slug so re-importing a feed picks the same images
                rng=random.Random(first_row["Slug"]),
            )

            product, product_created = self.upsert_product(first_row, brand, categories, images)
            if product_created:
                result.products_created += 1

            imported = ImportedProduct(
                product_id=product.id,
                product_name=product_name,
                product_slug=first_row["Slug"],
                created=product_created,
            )

            variant_ids = list(product.variants or [])
            for row in rows:
                sku = row.get("Variant SKU", "")
                try:
                    variant, variant_created = self.upsert_variant(product, row)
                except Exception as e:
                    self.session.rollback()
                    logger.warning("import %s: variant %s failed: %s", self.import_id, sku, e)
                    result.add_error(f"Variant {sku} ({product_name}): {e}")
                    continue

                if variant_created:
                    result.variants_created += 1

                imported.variants.append(
                    ImportedVariant(
                        variant_id=variant.id,
                        variant_sku=sku,
                        variant_label=row.get("Variant Label"),
                        created=variant_created,
                    )
                )

                # a variant belongs to one product only
                if variant.product_id == product.id and variant.id not in variant_ids:
                    variant_ids.append(variant.id)

            result.imported_products.append(imported)

            product.variants = variant_ids
            self.session.add(product)
            self.session.commit()

            self.link_brand_product(brand.id, product.id)
            for category in categories:
                self.link_category_product(category.id, product.id)

            result.success += 1

        except Exception as e:
            self.session.rollback()
            logger.warning("import %s: product %r failed: %s", self.import_id, product_name, e)
            result.add_error(f"Product {product_name}: {e}")

    def save_history(
        self, result: ImportResult, actor_id: int, file_name: str
    ) -> Optional[ProductImportHistory]:
        """Write the audit/undo record; a failure here never fails the import"""
        try:
            history = ProductImportHistory(
                import_id=self.import_id,
                file_name=file_name,
                imported_by=actor_id,
                total_rows=result.total_processed,
                products_created=result.products_created,
                variants_created=result.variants_created,
                success_count=result.success,
                error_count=result.errors,
                error_details=list(result.error_details),
                products=[p.model_dump() for p in result.imported_products],
            )
            self.session.add(history)
            self.session.commit()
            self.session.refresh(history)
            return history
        except Exception:
            self.session.rollback()
            logger.exception("import %s: failed to save import history", self.import_id)
            return None

    def import_rows(self, rows: List[Row], actor_id: int, file_name: str) -> ImportResult:
        result = ImportResult(total_processed=len(rows))
        groups = group_rows(rows)
        logger.info(
            "import %s: %d rows in %d product groups from %r by user %s",
            self.import_id,
            len(rows),
            len(groups),
            file_name,
            actor_id,
        )

        for group in groups.values():
            self.import_group(group, result)

        self.save_history(result, actor_id, file_name)

        logger.info(
            "import %s finished: %d ok, %d errors, %d products and %d variants created",
            self.import_id,
            result.success,
            result.errors,
            result.products_created,
            result.variants_created,
        )
        return result
