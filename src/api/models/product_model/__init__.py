from src.api.models.product_model.productsModel import *
from src.api.models.product_model.variantModel import *
from src.api.models.product_model.importHistoryModel import *

__all__ = [
    "Product",
    "Variant",
    "ProductImportHistory",
    "ImportHistoryRead",
    "ImportedProduct",
    "ImportedVariant",
    "ImportResult",
    "UndoRequest",
    "UndoResult",
]
