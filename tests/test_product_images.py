import random

from src.api.core.product_images import (
    CATEGORY_IMAGE_MAP,
    DEFAULT_IMAGES,
    pick_product_images,
)


def test_explicit_images_win():
    images = pick_product_images("Spices", " a.png , b.png,, c.png")
    assert images == ["a.png", "b.png", "c.png"]


def test_keyword_match_picks_two_from_category_set():
    images = pick_product_images("Whole Spices", rng=random.Random(1))
    assert len(images) == 2
    assert len(set(images)) == 2
    assert set(images) <= set(CATEGORY_IMAGE_MAP["spices"])


def test_keyword_with_single_image_returns_one():
    assert pick_product_images("Basmati Rice") == ["modern-tech-product.png"]


def test_first_keyword_in_table_order_wins():
    # "spices" comes before "masala blends"
    images = pick_product_images("Masala Blends and Spices", rng=random.Random(3))
    assert set(images) <= set(CATEGORY_IMAGE_MAP["spices"])


def test_unknown_category_gets_default_pair():
    assert pick_product_images("Hardware") == DEFAULT_IMAGES
    assert pick_product_images("") == DEFAULT_IMAGES


def test_same_seed_same_images():
    first = pick_product_images("Spices", rng=random.Random("garam-masala"))
    second = pick_product_images("Spices", rng=random.Random("garam-masala"))
    assert first == second
