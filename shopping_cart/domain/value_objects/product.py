"""商品を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import ProductId


@dataclass(frozen=True)
class Product:
    """商品（同一性は商品IDのみで判定する）."""

    product_id: ProductId
    name: str = field(default="", compare=False)
    unit_price: float = field(default=0.0, compare=False)

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.unit_price < 0:
            raise ValueError("Unit price cannot be negative")

    @classmethod
    def of(cls, product_id: str, name: str = "", unit_price: float = 0.0) -> Product:
        """文字列の商品IDからProductを生成する."""
        return cls(ProductId(product_id), name=name, unit_price=unit_price)

    def __str__(self) -> str:
        """文字列表現."""
        return self.name or self.product_id.value
