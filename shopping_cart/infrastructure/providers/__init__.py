"""プロバイダー実装."""
from .in_memory_product_catalog import InMemoryProductCatalog
from .unit_price_pricing_service import UnitPricePricingService

__all__ = ["InMemoryProductCatalog", "UnitPricePricingService"]
