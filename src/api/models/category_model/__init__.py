from src.api.models.category_model.categoryModel import *
from src.api.models.category_model.categoryProductModel import *

__all__ = [
    "Category",
    "CategoryProducts",
]
