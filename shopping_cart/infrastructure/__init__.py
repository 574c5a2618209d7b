"""インフラストラクチャ層モジュール."""
# HttpProductCatalog と DynamoDbProductCatalog は requests / boto3 に依存するため、
# 必要な時に shopping_cart.infrastructure.providers から直接インポートする
from .providers import InMemoryProductCatalog, UnitPricePricingService

__all__ = [
    "InMemoryProductCatalog",
    "UnitPricePricingService",
]
