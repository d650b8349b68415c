from .pool_service import PoolService

__all__ = ["PoolService"]
