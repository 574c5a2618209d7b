"""単価×数量の価格計算サービス."""
from shopping_cart.domain.entities import CartItem
from shopping_cart.domain.ports import PricingService


class UnitPricePricingService(PricingService):
    """商品の単価に数量を掛けた金額を返す価格計算サービス."""

    def calculate_item_price(self, item: CartItem) -> float:
        """アイテムの金額を計算する."""
        return item.product.unit_price * item.quantity
