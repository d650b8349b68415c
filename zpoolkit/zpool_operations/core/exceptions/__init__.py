"""
Exceptions raised or returned by zpool operations.
"""

from .zfs_exceptions import (
    ZFSException,
    ZpoolCommandError,
    ZpoolParseError,
    PoolException,
    PoolNotFoundError,
    ExportedPoolNotFoundError,
)

__all__ = [
    "ZFSException",
    "ZpoolCommandError",
    "ZpoolParseError",
    "PoolException",
    "PoolNotFoundError",
    "ExportedPoolNotFoundError",
]
