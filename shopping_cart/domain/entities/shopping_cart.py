"""ショッピングカート集約ルート."""
from __future__ import annotations

from ..identifiers import ProductId
from ..ports import PricingService, ProductCatalog
from ..value_objects import Product

from .cart_item import CartItem


class InvalidOperationError(Exception):
    """カートの状態に対して実行できない操作のエラー."""

    pass


class CartInvariantError(RuntimeError):
    """カートの内部整合性が崩れたことを示すエラー（実装バグ）."""

    pass


class ShoppingCart:
    """商品ごとに1行を持つカート（集約ルート）.

    不変条件:
        - pricing_service と product_catalog は None ではない
        - アイテムに None は含まれない
        - 同じ商品を参照するアイテムは2つ以上存在しない

    アイテムは商品IDをキーとする挿入順の dict で保持するため、
    重複は構造上発生しない。check_rep() は変更操作のたびに呼ばれる自己検査.
    """

    def __init__(
        self, pricing_service: PricingService, product_catalog: ProductCatalog
    ) -> None:
        """初期化.

        Args:
            pricing_service: アイテム金額の計算サービス
            product_catalog: 商品検索用カタログ
        """
        if pricing_service is None:
            raise ValueError("PricingService cannot be None")
        if product_catalog is None:
            raise ValueError("ProductCatalog cannot be None")
        self._pricing_service = pricing_service
        self._product_catalog = product_catalog
        self._items: dict[ProductId, CartItem] = {}
        self.check_rep()

    def check_rep(self) -> None:
        """不変条件を検査する.

        Raises:
            CartInvariantError: 不変条件が崩れている場合
        """
        if self._items is None or self._pricing_service is None or self._product_catalog is None:
            raise CartInvariantError("Core components cannot be None")
        seen: set[Product] = set()
        for product_id, item in self._items.items():
            if item is None:
                raise CartInvariantError("Cart contains a None item")
            if item.product in seen or item.product_id != product_id:
                raise CartInvariantError(f"Duplicate product found in cart: {item.product_id}")
            seen.add(item.product)

    def add_item(self, product_id: ProductId | str, quantity: int) -> CartItem:
        """商品をカートに追加する.

        既に同じ商品の行がある場合は、その行の数量を加算する。

        Args:
            product_id: 商品ID（文字列も可）
            quantity: 追加数量（1以上）

        Returns:
            追加または更新されたアイテム

        Raises:
            ValueError: 数量が0以下、または product_id が None・空文字の場合
            TypeError: product_id が文字列でも ProductId でもない場合
            ProductNotFoundError: 商品がカタログに存在しない場合
        """
        if quantity <= 0:
            raise ValueError("Quantity must be positive")
        product_id = ProductId.of(product_id)
        product = self._product_catalog.find_by_id(product_id)

        item = self._items.get(product.product_id)
        if item is not None:
            item.increase_quantity(quantity)
        else:
            item = CartItem(product=product, quantity=quantity)
            self._items[product.product_id] = item
        self.check_rep()
        return item

    def remove_item(self, product_id: ProductId | str) -> None:
        """商品の行を数量に関係なく丸ごと削除する.

        Raises:
            ValueError: product_id が None・空文字の場合
            TypeError: product_id が文字列でも ProductId でもない場合
            InvalidOperationError: 商品がカートに存在しない場合
        """
        product_id = ProductId.of(product_id)
        if product_id not in self._items:
            raise InvalidOperationError(
                f"Cannot remove item. Product ID '{product_id}' not found in cart"
            )
        del self._items[product_id]
        self.check_rep()

    def get_total_price(self) -> float:
        """合計金額を計算する."""
        total = 0.0
        for item in self._items.values():
            total += self._pricing_service.calculate_item_price(item)
        return total

    def get_item_count(self) -> int:
        """アイテム（商品の種類）数を取得する."""
        return len(self._items)

    def get_total_quantity(self) -> int:
        """全アイテムの数量の合計を取得する."""
        return sum(item.quantity for item in self._items.values())

    def clear_cart(self) -> None:
        """全アイテムを削除する."""
        self._items.clear()
        self.check_rep()

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._items) == 0

    def get_items(self) -> list[CartItem]:
        """アイテムのリストを取得（防御的コピー）."""
        return list(self._items.values())

    def get_item(self, product_id: ProductId | str) -> CartItem | None:
        """指定商品のアイテムを取得する."""
        return self._items.get(ProductId.of(product_id))
