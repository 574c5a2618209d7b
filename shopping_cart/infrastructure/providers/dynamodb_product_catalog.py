"""DynamoDB を使用した ProductCatalog 実装."""
import logging
import os
from typing import Any

import boto3
from botocore.exceptions import ClientError

from shopping_cart.domain.identifiers import ProductId
from shopping_cart.domain.ports import (
    ProductCatalog,
    ProductCatalogError,
    ProductNotFoundError,
)
from shopping_cart.domain.value_objects import Product

logger = logging.getLogger(__name__)


class DynamoDbProductCatalog(ProductCatalog):
    """DynamoDB の商品テーブルから商品を取得するカタログ."""

    def __init__(
        self,
        table: Any | None = None,
        table_name: str | None = None,
        region_name: str | None = None,
    ) -> None:
        """初期化.

        Args:
            table: boto3 の Table リソース（テスト時に注入）
            table_name: テーブル名
            region_name: AWS リージョン
        """
        if table is None:
            self._table_name = table_name or os.environ.get(
                "PRODUCT_TABLE_NAME", "shopping-cart-products"
            )
            dynamodb = boto3.resource(
                "dynamodb",
                region_name=region_name or os.environ.get("AWS_REGION", "ap-northeast-1"),
            )
            table = dynamodb.Table(self._table_name)
        self._table = table

    def find_by_id(self, product_id: ProductId) -> Product:
        """商品IDで検索する."""
        try:
            response = self._table.get_item(Key={"product_id": product_id.value})
        except ClientError as e:
            logger.error(f"Failed to get product {product_id}: {e}")
            raise ProductCatalogError(f"Failed to get product: {e}") from e
        item = response.get("Item")
        if item is None:
            raise ProductNotFoundError(product_id)

        try:
            product = self._from_dynamodb_item(item)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed product item for {product_id}: {e!r}")
            raise ProductCatalogError(f"Malformed product item: {e!r}") from e
        if product.product_id != product_id:
            logger.error(f"Product ID mismatch: requested {product_id}, got {product.product_id}")
            raise ProductCatalogError(
                f"Product ID mismatch: requested {product_id}, got {product.product_id}"
            )
        return product

    def _from_dynamodb_item(self, item: dict[str, Any]) -> Product:
        """DynamoDB アイテムを Product に変換する（Decimal → float）."""
        return Product(
            product_id=ProductId.of(item["product_id"]),
            name=item.get("name", ""),
            unit_price=float(item.get("unit_price", 0)),
        )
