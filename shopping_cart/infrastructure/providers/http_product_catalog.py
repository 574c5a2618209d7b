"""HTTP API 経由の商品カタログ.

外部の商品マスタ API から GET /products/{product_id} で商品を取得する。
"""
import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from shopping_cart.domain.identifiers import ProductId
from shopping_cart.domain.ports import (
    ProductCatalog,
    ProductCatalogError,
    ProductNotFoundError,
)
from shopping_cart.domain.value_objects import Product

logger = logging.getLogger(__name__)


class HttpProductCatalog(ProductCatalog):
    """商品マスタ API から商品を取得するカタログ."""

    DEFAULT_TIMEOUT = 10  # seconds

    def __init__(self, base_url: str | None = None, timeout: int | None = None) -> None:
        """初期化.

        Args:
            base_url: 商品マスタ API の URL (例: http://localhost:8000)
            timeout: リクエストタイムアウト秒数
        """
        self._base_url = (
            base_url or os.environ.get("PRODUCT_CATALOG_API_URL", "http://localhost:8000")
        ).rstrip("/")
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """リトライ機能付きの HTTP セッションを作成する."""
        session = requests.Session()

        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def find_by_id(self, product_id: ProductId) -> Product:
        """商品IDで検索する."""
        try:
            response = self._session.get(
                f"{self._base_url}/products/{product_id.value}",
                timeout=self._timeout,
            )
            if response.status_code == 404:
                raise ProductNotFoundError(product_id)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to get product {product_id}: {e}")
            raise ProductCatalogError(f"Failed to get product: {e}") from e

        try:
            product = self._to_product(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed product response for {product_id}: {e!r}")
            raise ProductCatalogError(f"Malformed product response: {e!r}") from e
        if product.product_id != product_id:
            logger.error(f"Product ID mismatch: requested {product_id}, got {product.product_id}")
            raise ProductCatalogError(
                f"Product ID mismatch: requested {product_id}, got {product.product_id}"
            )
        return product

    def _to_product(self, data: dict[str, Any]) -> Product:
        """API レスポンスを Product に変換する."""
        return Product(
            product_id=ProductId.of(data["product_id"]),
            name=data.get("name", ""),
            unit_price=float(data.get("unit_price", 0.0)),
        )
