"""
Simple factory for service singletons.

Activities call `ServiceFactory.get_*()` instead of instantiating services
themselves. Tests replace the class-level cache to inject fakes.
"""

from theater_billing.services.delivery import StatementDeliveryService


class ServiceFactory:
    """Lazily creates and caches service instances (class-level singletons)."""

    _delivery: StatementDeliveryService | None = None

    @classmethod
    def get_delivery_service(cls) -> StatementDeliveryService:
        if cls._delivery is None:
            cls._delivery = StatementDeliveryService()
        return cls._delivery

    @classmethod
    def reset(cls) -> None:
        cls._delivery = None
