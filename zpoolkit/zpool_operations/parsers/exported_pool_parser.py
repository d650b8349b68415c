"""
Parser for the importable-pool report printed by ``zpool import`` and
``zpool import -D``.

The report is one block per pool::

       pool: tank
         id: 15451357997522795478
      state: ONLINE
     action: The pool can be imported using its name or numeric identifier.
     config:

            tank        ONLINE
              mirror-0  ONLINE
                sda     ONLINE
                sdb     ONLINE

Each block is scanned forward line by line; there is no grammar, so the
scanner relies on the first token of each line and a little carried state.
Unrecognised lines are absorbed (as wrapped text or as devices), never
rejected, because the layout is not stable across zpool versions.
"""
import logging
from typing import List

from ..core.entities.pool import ExportedZpool
from .common import (
    BLOCK_START_KEY,
    HEADER_FIELDS,
    DeviceResolver,
    LineKind,
    VdevTreeBuilder,
    classify_line,
    identity_resolver,
    set_once,
)

logger = logging.getLogger(__name__)

# The only header whose text may wrap onto the following line
_WRAPPING_KEY = "action:"


def scan_exported_pool(pool: ExportedZpool,
                       lines: List[List[str]],
                       resolve: DeviceResolver = identity_resolver) -> int:
    """Fill ``pool`` from the lines following its ``pool:`` line.

    Stops at the next ``pool:`` line, which is left for the caller.
    Returns the number of lines consumed.
    """
    tree = VdevTreeBuilder(resolve)
    action_wraps = False
    consumed = 0
    
    for tokens in lines:
        line = classify_line(tokens, pool.name)
        
        if line.kind == LineKind.BLOCK_START:
            break
        consumed += 1
        
        if line.kind in (LineKind.BLANK, LineKind.SELF_ECHO):
            continue
        
        if line.kind == LineKind.HEADER_FIELD:
            assigned = set_once(pool, HEADER_FIELDS[line.key], line.value)
            if line.key == _WRAPPING_KEY:
                action_wraps = assigned
            continue
        
        if line.kind == LineKind.SECTION_MARKER:
            action_wraps = False
            continue
        
        if action_wraps:
            pool.action = f"{pool.action} {' '.join(line.tokens)}"
            action_wraps = False
            continue
        
        tree.add(line)
    
    pool.vdevs.extend(tree.groups)
    return consumed


def parse_exported_pools(lines: List[List[str]],
                         resolve: DeviceResolver = identity_resolver) -> List[ExportedZpool]:
    """Split a whole import report into pool records, in report order.

    A report without any ``pool:`` line yields an empty list.
    """
    pools: List[ExportedZpool] = []
    i = 0
    while i < len(lines):
        tokens = lines[i]
        if not tokens or tokens[0] != BLOCK_START_KEY:
            i += 1
            continue
        
        pool = ExportedZpool(name=" ".join(tokens[1:]))
        consumed = scan_exported_pool(pool, lines[i + 1:], resolve)
        logger.debug("Parsed importable pool %s (id=%s) from %d lines", pool.name, pool.id, consumed)
        pools.append(pool)
        i += 1 + consumed
    
    return pools
