"""ポート（ProductCatalog, PricingService）のテスト."""
from abc import ABC

import pytest

from shopping_cart.domain.identifiers import ProductId
from shopping_cart.domain.ports import (
    PricingService,
    ProductCatalog,
    ProductCatalogError,
    ProductNotFoundError,
)


class TestPorts:
    """ポートの単体テスト."""

    def test_ProductCatalogは抽象基底クラスである(self) -> None:
        """ProductCatalogがABCを継承していることを確認."""
        assert issubclass(ProductCatalog, ABC)
        with pytest.raises(TypeError):
            ProductCatalog()  # type: ignore[abstract]

    def test_PricingServiceは抽象基底クラスである(self) -> None:
        """PricingServiceがABCを継承していることを確認."""
        assert issubclass(PricingService, ABC)
        with pytest.raises(TypeError):
            PricingService()  # type: ignore[abstract]

    def test_ProductNotFoundErrorは商品IDを保持する(self) -> None:
        """ProductNotFoundErrorが商品IDとメッセージを持つことを確認."""
        error = ProductNotFoundError(ProductId("P9"))
        assert error.product_id == ProductId("P9")
        assert "P9" in str(error)

    def test_ProductCatalogErrorは業務エラーと区別される(self) -> None:
        """ProductCatalogErrorとProductNotFoundErrorが別系統であることを確認."""
        assert not issubclass(ProductCatalogError, ProductNotFoundError)
        assert not issubclass(ProductNotFoundError, ProductCatalogError)
