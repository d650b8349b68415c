"""
zpoolkit test configuration and fixtures
"""

import pytest
from unittest.mock import Mock, AsyncMock

from zpoolkit.zpool_operations.services.pool_service import PoolService


@pytest.fixture
def mock_executor():
    """Create mock command executor."""
    executor = Mock()
    executor.execute_zpool = AsyncMock()
    return executor


@pytest.fixture
def mock_logger():
    """Create mock logger."""
    logger = Mock()
    logger.info = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.debug = Mock()
    return logger


@pytest.fixture
def pool_service(mock_executor, mock_logger):
    """Create PoolService instance with mocks."""
    return PoolService(executor=mock_executor, logger=mock_logger)
