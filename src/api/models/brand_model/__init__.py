from src.api.models.brand_model.brandModel import *
from src.api.models.brand_model.brandProductModel import *

__all__ = [
    "Brand",
    "BrandProducts",
]
