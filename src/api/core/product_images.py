# src/api/core/product_images.py
import random
from typing import List, Optional

from src.api.core.utility import split_list

# checked in this order, first keyword contained in the category name wins
CATEGORY_IMAGE_MAP = {
    "spices": [
        "whole-spices.png",
        "spice-closeup.png",
        "spice-texture.png",
        "garam-masala.png",
        "assorted-masalas.png",
        "spice-cooking.png",
    ],
    "cooking essentials": [
        "whole-spices.png",
        "spice-closeup.png",
        "spice-texture.png",
    ],
    "health products": [
        "spice-texture.png",
        "garam-masala.png",
        "mango-pickle-jar.png",
    ],
    "rice": ["modern-tech-product.png"],
    "staples": ["modern-tech-product.png"],
    "lentils": ["modern-tech-product.png"],
    "masala blends": [
        "garam-masala.png",
        "assorted-masalas.png",
        "spice-cooking.png",
    ],
    "dairy": ["jar-of-pickles.png", "mango-pickle-jar.png"],
    "beverages": ["chai-snacks.png"],
    "flour": ["modern-tech-product.png"],
    "south indian": ["assorted-masalas.png", "spice-cooking.png"],
    "sweeteners": ["mango-pickle-jar.png", "jar-of-pickles.png"],
}

DEFAULT_IMAGES = ["modern-tech-product.png", "placeholder.jpg"]


def pick_product_images(
    category_name: str,
    image_string: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Images for an imported product.

    Explicit images from the feed always win. Otherwise one or two images are
    picked from the first category keyword found in ``category_name``, and
    products with no matching category get the default pair.
    """
    images = split_list(image_string)
    if images:
        return images

    rng = rng or random.Random()
    lower_category = (category_name or "").lower()
    for keyword, keyword_images in CATEGORY_IMAGE_MAP.items():
        if keyword in lower_category:
            return rng.sample(keyword_images, min(2, len(keyword_images)))

    return list(DEFAULT_IMAGES)
