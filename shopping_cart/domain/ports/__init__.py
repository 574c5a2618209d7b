"""ポートモジュール."""
from .pricing_service import PricingService
from .product_catalog import ProductCatalog, ProductCatalogError, ProductNotFoundError

__all__ = [
    "PricingService",
    "ProductCatalog",
    "ProductCatalogError",
    "ProductNotFoundError",
]
