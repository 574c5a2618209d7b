"""依存性注入コンテナ."""
from shopping_cart.domain.entities import ShoppingCart
from shopping_cart.domain.ports import PricingService, ProductCatalog
from shopping_cart.infrastructure import UnitPricePricingService
from shopping_cart.infrastructure.providers.product_catalog_factory import (
    create_product_catalog,
)


class Dependencies:
    """依存性を管理するコンテナ.

    PRODUCT_CATALOG 環境変数に応じてカタログ実装を切り替える。
    未設定の場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _product_catalog: ProductCatalog | None = None
    _pricing_service: PricingService | None = None

    @classmethod
    def get_product_catalog(cls) -> ProductCatalog:
        """商品カタログを取得する."""
        if cls._product_catalog is None:
            cls._product_catalog = create_product_catalog()
        return cls._product_catalog

    @classmethod
    def set_product_catalog(cls, catalog: ProductCatalog) -> None:
        """商品カタログを設定する（テスト用）."""
        cls._product_catalog = catalog

    @classmethod
    def get_pricing_service(cls) -> PricingService:
        """価格計算サービスを取得する."""
        if cls._pricing_service is None:
            cls._pricing_service = UnitPricePricingService()
        return cls._pricing_service

    @classmethod
    def set_pricing_service(cls, service: PricingService) -> None:
        """価格計算サービスを設定する（テスト用）."""
        cls._pricing_service = service

    @classmethod
    def create_cart(cls) -> ShoppingCart:
        """新しいカートを生成する."""
        return ShoppingCart(
            pricing_service=cls.get_pricing_service(),
            product_catalog=cls.get_product_catalog(),
        )

    @classmethod
    def reset(cls) -> None:
        """全依存性をリセットする（テスト用）."""
        cls._product_catalog = None
        cls._pricing_service = None
