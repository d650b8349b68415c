"""
Helpers shared by the zpool report parsers: line classification,
first-write-wins field assignment and the vdev tree builder.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from ..core.entities.pool import UNGROUPED_VDEV_NAME, Vdev, VdevGroup


# Maps a raw device token from a report to a presentable device name
DeviceResolver = Callable[[str], str]

BLOCK_START_KEY = "pool:"
CONFIG_MARKER = "config:"

# Header keys of an import report and the record attribute each one sets
HEADER_FIELDS = {
    "id:": "id",
    "state:": "state",
    "status:": "status",
    "action:": "action",
    "see:": "see",
}

VDEV_GROUP_KINDS = frozenset({
    "mirror",
    "raidz", "raidz1", "raidz2", "raidz3",
    "draid", "draid1", "draid2", "draid3",
    "spare", "replacing",
    "logs", "cache", "spares", "special", "dedup",
})

_INDEX_SUFFIX = re.compile(r"-\d+$")


def identity_resolver(token: str) -> str:
    return token


def is_vdev_group(token: str) -> bool:
    """Check whether a device-tree token names a redundancy group.

    Tokens look like ``raidz1-0``; dRAID also carries its geometry,
    e.g. ``draid2:4d:1s:8c-0``.
    """
    kind = _INDEX_SUFFIX.sub("", token)
    kind = kind.split(":", 1)[0]
    return kind in VDEV_GROUP_KINDS


def set_once(record: object, attr: str, value: Optional[str]) -> bool:
    """Assign ``record.attr`` only if it is still unset. Returns True if it
    was assigned."""
    if value is None or getattr(record, attr) is not None:
        return False
    setattr(record, attr, value)
    return True


def join_tokens(tokens: List[str]) -> Optional[str]:
    """Space-join tokens; an empty tail means no value."""
    if not tokens:
        return None
    return " ".join(tokens)


class LineKind(Enum):
    BLANK = "blank"
    BLOCK_START = "block_start"
    HEADER_FIELD = "header_field"
    SECTION_MARKER = "section_marker"
    SELF_ECHO = "self_echo"
    GROUP_HEADER = "group_header"
    DEVICE = "device"


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    tokens: List[str]
    key: Optional[str] = None
    value: Optional[str] = None
    
    @property
    def name(self) -> str:
        return self.tokens[0]
    
    @property
    def health(self) -> str:
        return self.tokens[1] if len(self.tokens) > 1 else ""
    
    @property
    def is_structural(self) -> bool:
        return self.kind in (LineKind.GROUP_HEADER, LineKind.DEVICE)


def classify_line(tokens: List[str], pool_name: Optional[str] = None) -> ClassifiedLine:
    """Tag one tokenized report line with what it represents."""
    if not tokens:
        return ClassifiedLine(LineKind.BLANK, tokens)
    
    first = tokens[0]
    if first == BLOCK_START_KEY:
        return ClassifiedLine(LineKind.BLOCK_START, tokens, key=first, value=join_tokens(tokens[1:]))
    if first in HEADER_FIELDS:
        return ClassifiedLine(LineKind.HEADER_FIELD, tokens, key=first, value=join_tokens(tokens[1:]))
    if first == CONFIG_MARKER:
        return ClassifiedLine(LineKind.SECTION_MARKER, tokens, key=first)
    if pool_name is not None and first == pool_name:
        return ClassifiedLine(LineKind.SELF_ECHO, tokens)
    if is_vdev_group(first):
        return ClassifiedLine(LineKind.GROUP_HEADER, tokens)
    return ClassifiedLine(LineKind.DEVICE, tokens)


class VdevTreeBuilder:
    """Rebuilds the two-level group/device tree from report lines.

    The currently open group is kept here instead of leaking into the
    calling loop; ``groups`` is the finished sequence in report order.
    """
    
    def __init__(self, resolve: DeviceResolver = identity_resolver):
        self._resolve = resolve
        self._current: Optional[VdevGroup] = None
        self.groups: List[VdevGroup] = []
    
    def open_group(self, name: str, health: str) -> VdevGroup:
        group = VdevGroup(group=Vdev(name=self._resolve(name), health=health))
        self.groups.append(group)
        self._current = group
        return group
    
    def add_device(self, name: str, health: str) -> Vdev:
        if self._current is None:
            self._current = VdevGroup(group=Vdev(name=UNGROUPED_VDEV_NAME, health=""))
            self.groups.append(self._current)
        device = Vdev(name=self._resolve(name), health=health)
        self._current.devices.append(device)
        return device
    
    def add(self, line: ClassifiedLine) -> None:
        """Feed one structural line."""
        if line.kind == LineKind.GROUP_HEADER:
            self.open_group(line.name, line.health)
        else:
            self.add_device(line.name, line.health)
