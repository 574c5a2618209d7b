"""エンティティモジュール."""
from .cart_item import CartItem
from .shopping_cart import CartInvariantError, InvalidOperationError, ShoppingCart

__all__ = [
    "CartInvariantError",
    "CartItem",
    "InvalidOperationError",
    "ShoppingCart",
]
