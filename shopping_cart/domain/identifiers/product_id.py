"""商品識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """カタログ内で一意な商品ID."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("ProductId cannot be empty")

    @classmethod
    def of(cls, value: ProductId | str) -> ProductId:
        """文字列またはProductIdからProductIdを生成する."""
        if isinstance(value, ProductId):
            return value
        if value is None:
            raise ValueError("Product ID cannot be None")
        if not isinstance(value, str):
            raise TypeError(f"Product ID must be str or ProductId, not {type(value).__name__}")
        return cls(value)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
