# brand
from .brand_model.brandModel import Brand
from .brand_model.brandProductModel import BrandProducts

# category
from .category_model.categoryModel import Category
from .category_model.categoryProductModel import CategoryProducts

# product
from .product_model.productsModel import Product
from .product_model.variantModel import Variant

# import history
from .product_model.importHistoryModel import ProductImportHistory


__all__ = [
    "Brand",
    "BrandProducts",
    "Category",
    "CategoryProducts",
    "Product",
    "Variant",
    "ProductImportHistory",
]
