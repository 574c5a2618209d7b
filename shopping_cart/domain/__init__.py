"""ドメイン層モジュール."""
from .entities import CartInvariantError, CartItem, InvalidOperationError, ShoppingCart
from .identifiers import ProductId
from .ports import PricingService, ProductCatalog, ProductCatalogError, ProductNotFoundError
from .value_objects import Product

__all__ = [
    # Identifiers
    "ProductId",
    # Value Objects
    "Product",
    # Entities
    "CartItem",
    "ShoppingCart",
    # Ports
    "PricingService",
    "ProductCatalog",
    # Errors
    "CartInvariantError",
    "InvalidOperationError",
    "ProductCatalogError",
    "ProductNotFoundError",
]
