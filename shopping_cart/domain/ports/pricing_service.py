"""価格計算サービスインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import CartItem


class PricingService(ABC):
    """カートアイテム1行分の金額を計算するインターフェース."""

    @abstractmethod
    def calculate_item_price(self, item: CartItem) -> float:
        """アイテムの合計金額（単価×数量など）を計算する."""
        pass
