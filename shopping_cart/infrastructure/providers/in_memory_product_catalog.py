"""商品カタログのインメモリ実装."""
from collections.abc import Iterable

from shopping_cart.domain.identifiers import ProductId
from shopping_cart.domain.ports import ProductCatalog, ProductNotFoundError
from shopping_cart.domain.value_objects import Product


class InMemoryProductCatalog(ProductCatalog):
    """商品カタログのインメモリ実装（ローカル開発・テスト用）."""

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        """初期化."""
        self._products: dict[ProductId, Product] = {}
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        """商品を登録する（同じIDは上書き）."""
        self._products[product.product_id] = product

    def find_by_id(self, product_id: ProductId) -> Product:
        """商品IDで検索する."""
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
