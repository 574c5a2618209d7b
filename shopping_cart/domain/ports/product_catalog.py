"""商品カタログインターフェース."""
from abc import ABC, abstractmethod

from ..identifiers import ProductId
from ..value_objects import Product


class ProductNotFoundError(Exception):
    """商品がカタログに存在しないエラー."""

    def __init__(self, product_id: ProductId) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class ProductCatalogError(Exception):
    """商品カタログの通信・バックエンドエラー."""

    pass


class ProductCatalog(ABC):
    """商品IDから商品を解決するカタログのインターフェース."""

    @abstractmethod
    def find_by_id(self, product_id: ProductId) -> Product:
        """商品IDで検索する.

        Raises:
            ProductNotFoundError: 商品が存在しない場合
        """
        pass
