from sqlmodel import select

from src.api.core.csv_parser import parse_csv
from src.api.models.brand_model import Brand, BrandProducts
from src.api.models.category_model import Category, CategoryProducts
from src.api.models.product_model import Product, ProductImportHistory, Variant
from src.api.services.product_import_service import ProductImportService, group_rows


def run_import(session, rows, actor_id=1, file_name="products.csv"):
    service = ProductImportService(session)
    return service, service.import_rows(rows, actor_id=actor_id, file_name=file_name)


def two_variant_rows(make_row):
    return [
        make_row(),
        make_row(
            **{
                "Variant SKU": "GM-200",
                "Variant Label": "200g",
                "Variant Slug": "garam-masala-200g",
                "Variant Price": "850",
            }
        ),
    ]


def test_import_creates_product_variants_and_links(session, make_row):
    _, result = run_import(session, two_variant_rows(make_row))

    assert result.total_processed == 2
    assert result.products_created == 1
    assert result.variants_created == 2
    assert result.success == 1
    assert result.errors == 0

    product = session.exec(select(Product)).one()
    variants = session.exec(select(Variant)).all()
    assert product.slug == "garam-masala"
    assert product.price == 450
    assert product.discount == 10
    assert product.is_active is True
    assert product.is_featured is True
    assert product.is_grocery is True
    assert product.is_top_selling is False
    assert product.images == ["garam-1.png", "garam-2.png"]
    assert product.stock == 0
    assert product.reviews == []
    assert sorted(product.variants) == sorted(v.id for v in variants)
    assert all(v.product_id == product.id for v in variants)
    assert all(v.images == [] for v in variants)


def test_parsed_feed_flags_reach_product(session, make_row, make_csv):
    text = make_csv(make_row(Active="TRUE", Featured="True", Grocery="FALSE"))
    run_import(session, parse_csv(text))

    product = session.exec(select(Product)).one()
    assert product.is_active is True
    assert product.is_featured is True
    assert product.is_grocery is False


def test_brand_and_categories_created_on_demand(session, make_row):
    run_import(session, [make_row()])

    brand = session.exec(select(Brand)).one()
    assert brand.name == "Shan"
    assert brand.description == "Shan brand"
    assert brand.is_active is True

    categories = session.exec(select(Category).order_by(Category.id)).all()
    assert [c.name for c in categories] == ["Spices", "Masala Blends"]
    assert categories[1].slug == "masala-blends"
    assert categories[1].description == "Masala Blends category"

    product = session.exec(select(Product)).one()
    assert product.brand_id == brand.id
    assert product.categories == [c.id for c in categories]


def test_existing_brand_and_category_reused(session, make_row):
    session.add(Brand(name="Shan", description="kept", is_active=False))
    session.add(Category(name="Spices", slug="spices-custom", description="kept"))
    session.commit()

    run_import(session, [make_row()])

    assert len(session.exec(select(Brand)).all()) == 1
    assert session.exec(select(Brand)).one().description == "kept"
    spices = session.exec(select(Category).where(Category.name == "Spices")).one()
    assert spices.slug == "spices-custom"


def test_reimport_is_idempotent(session, make_row):
    rows = two_variant_rows(make_row)
    run_import(session, rows)
    product_before = session.exec(select(Product)).one()
    variant_ids = sorted(product_before.variants)

    _, second = run_import(session, rows)

    assert second.products_created == 0
    assert second.variants_created == 0
    assert second.success == 1

    assert len(session.exec(select(Product)).all()) == 1
    assert len(session.exec(select(Variant)).all()) == 2
    product = session.exec(select(Product)).one()
    assert sorted(product.variants) == variant_ids

    brand_link = session.exec(select(BrandProducts)).one()
    assert brand_link.products == [product.id]
    for link in session.exec(select(CategoryProducts)).all():
        assert link.products == [product.id]


def test_reimport_overwrites_fields(session, make_row):
    run_import(session, [make_row()])

    product = session.exec(select(Product)).one()
    assert product.is_featured is True
    assert session.exec(select(Variant)).one().is_active is True

    updated = make_row(
        **{
            "Price": "500",
            "Featured": "false",
            "Description": "",
            "Variant Stock": "3",
            "Variant Active": "false",
        }
    )
    run_import(session, [updated])

    product = session.exec(select(Product)).one()
    assert product.price == 500
    assert product.is_featured is False
    # blanks overwrite too
    assert product.description == ""
    assert product.updated_at is not None

    variant = session.exec(select(Variant)).one()
    assert variant.stock == 3
    assert variant.is_active is False
    assert variant.updated_at is not None


def test_images_from_category_are_stable_across_imports(session, make_row):
    row = make_row(Images="", Categories="Spices")
    run_import(session, [row])
    first = session.exec(select(Product)).one().images

    run_import(session, [row])
    second = session.exec(select(Product)).one().images

    assert len(first) == 2
    assert first == second


def test_grouping_key_is_name_and_slug(make_row):
    rows = [
        make_row(**{"Product Name": "Garam Masala"}),
        make_row(**{"Product Name": "Garam Masala Classic", "Variant SKU": "GM-300"}),
        make_row(**{"Variant SKU": "GM-400"}),
    ]
    groups = group_rows(rows)

    assert list(groups) == [
        ("Garam Masala", "garam-masala"),
        ("Garam Masala Classic", "garam-masala"),
    ]
    assert len(groups[("Garam Masala", "garam-masala")]) == 2


def test_same_slug_different_name_updates_one_product(session, make_row):
    rows = [
        make_row(**{"Product Name": "Garam Masala"}),
        make_row(**{"Product Name": "Garam Masala Classic", "Variant SKU": "GM-300"}),
    ]
    _, result = run_import(session, rows)

    assert result.success == 2
    assert result.products_created == 1
    assert len(result.imported_products) == 2

    product = session.exec(select(Product)).one()
    assert product.name == "Garam Masala Classic"
    assert len(product.variants) == 2


def test_failing_variant_only_fails_that_row(session, make_row, monkeypatch):
    original = ProductImportService.upsert_variant

    def flaky_upsert_variant(self, product, row):
        if row["Variant SKU"] == "BETA-1":
            raise ValueError("stock service down")
        return original(self, product, row)

    monkeypatch.setattr(ProductImportService, "upsert_variant", flaky_upsert_variant)

    rows = [
        make_row(**{"Product Name": "Alpha", "Slug": "alpha", "Variant SKU": "ALPHA-1"}),
        make_row(**{"Product Name": "Beta", "Slug": "beta", "Variant SKU": "BETA-1"}),
        make_row(**{"Product Name": "Beta", "Slug": "beta", "Variant SKU": "BETA-2"}),
    ]
    _, result = run_import(session, rows)

    assert result.errors == 1
    assert result.error_details == ["Variant BETA-1 (Beta): stock service down"]
    assert result.success == 2
    assert result.products_created == 2
    assert result.variants_created == 2

    skus = {v.sku for v in session.exec(select(Variant)).all()}
    assert skus == {"ALPHA-1", "BETA-2"}

    history = session.exec(select(ProductImportHistory)).one()
    assert history.error_count == 1
    beta = [p for p in history.products if p["product_slug"] == "beta"][0]
    assert [v["variant_sku"] for v in beta["variants"]] == ["BETA-2"]


def test_failing_group_is_reported_and_skipped(session, make_row, monkeypatch):
    original = ProductImportService.resolve_brand

    def broken_brand(self, brand_name):
        if brand_name == "Broken":
            raise RuntimeError("brand lookup failed")
        return original(self, brand_name)

    monkeypatch.setattr(ProductImportService, "resolve_brand", broken_brand)

    rows = [
        make_row(**{"Product Name": "Alpha", "Slug": "alpha", "Brand": "Broken"}),
        make_row(**{"Product Name": "Beta", "Slug": "beta", "Variant SKU": "BETA-1"}),
    ]
    _, result = run_import(session, rows)

    assert result.errors == 1
    assert result.error_details == ["Product Alpha: brand lookup failed"]
    assert result.success == 1
    assert [p.slug for p in session.exec(select(Product)).all()] == ["beta"]


def test_history_records_snapshot(session, make_row):
    service, result = run_import(session, two_variant_rows(make_row), actor_id=5)

    history = session.exec(select(ProductImportHistory)).one()
    assert history.import_id == service.import_id
    assert history.file_name == "products.csv"
    assert history.imported_by == 5
    assert history.total_rows == 2
    assert history.success_count == 1
    assert history.is_undone is False

    product = session.exec(select(Product)).one()
    entry = history.products[0]
    assert entry["product_id"] == product.id
    assert entry["product_slug"] == "garam-masala"
    assert entry["created"] is True
    assert [v["variant_sku"] for v in entry["variants"]] == ["GM-100", "GM-200"]


def test_history_write_failure_does_not_fail_import(session, make_row):
    # imported_by is required, so the history insert fails
    _, result = run_import(session, [make_row()], actor_id=None)

    assert result.success == 1
    assert result.products_created == 1
    assert session.exec(select(ProductImportHistory)).all() == []
    assert len(session.exec(select(Product)).all()) == 1
