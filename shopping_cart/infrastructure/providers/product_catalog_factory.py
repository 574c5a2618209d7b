"""ProductCatalog ファクトリ."""
import logging
import os

from shopping_cart.domain.ports import ProductCatalog

logger = logging.getLogger(__name__)


def create_product_catalog() -> ProductCatalog:
    """環境変数に基づいてProductCatalogを生成する.

    PRODUCT_CATALOG:
        "memory"   → InMemoryProductCatalog（ローカル開発・テスト用）
        "http"     → HttpProductCatalog
        "dynamodb" → DynamoDbProductCatalog
        未設定      → InMemoryProductCatalog（デフォルト）
    """
    catalog_type = os.environ.get("PRODUCT_CATALOG")
    if catalog_type == "http":
        from shopping_cart.infrastructure.providers.http_product_catalog import (
            HttpProductCatalog,
        )

        return HttpProductCatalog()

    if catalog_type == "dynamodb":
        from shopping_cart.infrastructure.providers.dynamodb_product_catalog import (
            DynamoDbProductCatalog,
        )

        return DynamoDbProductCatalog()

    if catalog_type and catalog_type != "memory":
        logger.warning("Unknown PRODUCT_CATALOG=%s, falling back to memory", catalog_type)

    from shopping_cart.infrastructure.providers.in_memory_product_catalog import (
        InMemoryProductCatalog,
    )

    return InMemoryProductCatalog()
