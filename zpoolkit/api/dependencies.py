"""
Dependencies for API endpoints.
"""
from functools import lru_cache

from ..zpool_operations.factories.service_factory import ServiceFactory, create_default_service_factory
from ..zpool_operations.services.pool_service import PoolService


@lru_cache()
def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    return create_default_service_factory()


async def get_pool_service() -> PoolService:
    """Get a PoolService instance."""
    return await get_service_factory().create_pool_service()
