"""
Parsers for a currently imported pool: ``zpool get -Hp`` property lines
and the device tree of ``zpool status``.
"""
from typing import List

from ..core.entities.pool import Zpool
from ..core.exceptions.zfs_exceptions import ZpoolParseError
from ..core.value_objects.size_value import SizeValue
from .common import (
    CONFIG_MARKER,
    DeviceResolver,
    LineKind,
    VdevTreeBuilder,
    classify_line,
    identity_resolver,
)

# Properties requested from `zpool get`, in the order they are printed
ZPOOL_PROPERTIES = (
    "name",
    "health",
    "allocated",
    "size",
    "free",
    "readonly",
    "dedupratio",
    "fragmentation",
    "freeing",
    "leaked",
)

_SIZE_PROPERTIES = {
    "allocated": "allocated",
    "size": "size",
    "free": "free",
    "freeing": "freeing",
    "leaked": "leaked",
}

_STATUS_HEADING = "NAME"
_STATUS_END = "errors:"


def zpool_get_args(pool_name: str) -> List[str]:
    return ["get", "-Hp", "-o", "name,property,value", ",".join(ZPOOL_PROPERTIES), pool_name]


def _strip_unit(value: str, suffix: str) -> str:
    if value == "-":
        return "0"
    return value[:-len(suffix)] if value.endswith(suffix) else value


def parse_property_line(pool: Zpool, line: List[str]) -> None:
    """Apply one ``name  property  value`` line to ``pool``.

    Raises ZpoolParseError on values that cannot be converted.
    """
    if not line:
        return
    if len(line) < 3:
        raise ZpoolParseError("expected name, property and value", line)
    
    prop, value = line[1], line[2]
    try:
        if prop == "name":
            pool.name = value
        elif prop == "health":
            pool.health = value
        elif prop in _SIZE_PROPERTIES:
            setattr(pool, _SIZE_PROPERTIES[prop], SizeValue.from_zpool_value(value))
        elif prop == "fragmentation":
            pool.fragmentation = int(_strip_unit(value, "%"))
        elif prop == "readonly":
            pool.read_only = value == "on"
        elif prop == "dedupratio":
            pool.dedup_ratio = float(_strip_unit(value, "x"))
    except ValueError as e:
        raise ZpoolParseError(f"invalid value for {prop}: {value} ({e})", line) from e


def parse_status_vdevs(pool: Zpool,
                       lines: List[List[str]],
                       resolve: DeviceResolver = identity_resolver) -> None:
    """Read the device tree from ``zpool status`` output into ``pool.vdevs``.

    Only the ``config:`` section is used; it ends at ``errors:``.
    """
    tree = VdevTreeBuilder(resolve)
    in_config = False
    
    for tokens in lines:
        if not tokens:
            continue
        if not in_config:
            in_config = tokens[0] == CONFIG_MARKER
            continue
        if tokens[0] == _STATUS_END:
            break
        if tokens[0] == _STATUS_HEADING:
            continue
        
        line = classify_line(tokens, pool.name)
        if line.is_structural:
            tree.add(line)
    
    pool.vdevs = tree.groups
