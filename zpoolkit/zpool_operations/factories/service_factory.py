"""
Service factory for dependency injection and service creation.
"""
import asyncio
from typing import Dict, Any, Optional

from ..core.interfaces.command_executor import ICommandExecutor
from ..core.interfaces.logger_interface import ILogger
from ..infrastructure.command_executor import CommandExecutor
from ..infrastructure.device_resolver import DeviceResolver, DEFAULT_SEARCH_PATHS
from ..infrastructure.logging.structured_logger import StructuredLogger
from ..services.pool_service import PoolService
from ...config import get_config


class ServiceFactory:
    """Factory for creating service instances with proper dependency injection."""
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self._config = config or {}
        self._logger_instances: Dict[str, ILogger] = {}
        self._lock = asyncio.Lock()
        self._build_dependencies()
    
    def _build_dependencies(self) -> None:
        self._executor: ICommandExecutor = CommandExecutor(
            binary=self._config.get('zpool_binary', 'zpool'),
            timeout=self._config.get('command_timeout', 30)
        )
        self._resolver = DeviceResolver(
            self._config.get('device_search_paths', DEFAULT_SEARCH_PATHS)
        )
    
    async def create_pool_service(self) -> PoolService:
        """Create a PoolService instance with injected dependencies."""
        logger = await self._get_logger("pool_service")
        return PoolService(
            executor=self._executor,
            logger=logger,
            resolver=self._resolver
        )
    
    async def _get_logger(self, service_name: str) -> ILogger:
        """Get or create a logger instance for a service."""
        async with self._lock:
            if service_name not in self._logger_instances:
                self._logger_instances[service_name] = StructuredLogger(
                    name=service_name,
                    level=self._config.get('log_level', 'INFO')
                )
            return self._logger_instances[service_name]


def create_default_service_factory() -> ServiceFactory:
    """Create a service factory from the environment configuration."""
    return ServiceFactory(get_config().to_service_config())
