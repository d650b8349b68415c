"""
Domain entities for zpool operations.
"""

from .pool import (
    DESTROYED_MARKER,
    UNGROUPED_VDEV_NAME,
    ZpoolState,
    Vdev,
    VdevGroup,
    Zpool,
    ExportedZpool,
)

__all__ = [
    "DESTROYED_MARKER",
    "UNGROUPED_VDEV_NAME",
    "ZpoolState",
    "Vdev",
    "VdevGroup",
    "Zpool",
    "ExportedZpool",
]
