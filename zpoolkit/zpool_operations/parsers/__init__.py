"""
Parsers turning tokenized zpool output into domain entities.
"""

from .common import classify_line, is_vdev_group, set_once, LineKind, VdevTreeBuilder
from .exported_pool_parser import parse_exported_pools, scan_exported_pool
from .pool_status_parser import parse_property_line, parse_status_vdevs, zpool_get_args

__all__ = [
    "classify_line",
    "is_vdev_group",
    "set_once",
    "LineKind",
    "VdevTreeBuilder",
    "parse_exported_pools",
    "scan_exported_pool",
    "parse_property_line",
    "parse_status_vdevs",
    "zpool_get_args",
]
