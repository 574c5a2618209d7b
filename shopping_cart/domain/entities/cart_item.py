"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import ProductId
from ..value_objects import Product


@dataclass(eq=False)
class CartItem:
    """カート内の1行（商品と数量の組）."""

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.quantity < 1:
            raise ValueError("Quantity must be positive")

    @property
    def product_id(self) -> ProductId:
        """商品IDを取得する."""
        return self.product.product_id

    def increase_quantity(self, amount: int) -> None:
        """数量を加算する."""
        if amount < 1:
            raise ValueError("Quantity must be positive")
        self.quantity += amount
