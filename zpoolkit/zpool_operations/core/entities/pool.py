"""
Pool domain entities: attached pools, importable pools and their vdev trees.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum
from ..value_objects.size_value import SizeValue


# Substring the tool puts in the state of a destroyed-but-recoverable pool
DESTROYED_MARKER = "DESTROYED"

# Descriptor name of the synthetic group holding devices listed without a
# redundancy group header (plain stripes of disks or files)
UNGROUPED_VDEV_NAME = "disks"


class ZpoolState(Enum):
    """Pool states as reported by zpool.

    See https://openzfs.github.io/openzfs-docs/man/7/zpoolconcepts.7.html
    """
    ONLINE = "ONLINE"
    DEGRADED = "DEGRADED"
    FAULTED = "FAULTED"
    OFFLINE = "OFFLINE"
    UNAVAIL = "UNAVAIL"
    REMOVED = "REMOVED"
    DESTROYED = "ONLINE (DESTROYED)"


@dataclass(frozen=True)
class Vdev:
    """A single device (disk, partition or file) participating in a pool."""
    name: str
    health: str
    
    def is_healthy(self) -> bool:
        return self.health == ZpoolState.ONLINE.value
    
    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'health': self.health}


@dataclass
class VdevGroup:
    """Devices under one redundancy scheme (mirror, raidz...) or the
    synthetic group for bare devices."""
    group: Vdev
    devices: List[Vdev] = field(default_factory=list)
    
    @property
    def is_ungrouped(self) -> bool:
        return self.group.name == UNGROUPED_VDEV_NAME
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'group': self.group.to_dict(),
            'devices': [device.to_dict() for device in self.devices],
        }


@dataclass
class Zpool:
    """A pool currently imported on this system."""
    
    name: str
    health: str = ""
    allocated: SizeValue = SizeValue(0)
    size: SizeValue = SizeValue(0)
    free: SizeValue = SizeValue(0)
    fragmentation: int = 0
    read_only: bool = False
    freeing: SizeValue = SizeValue(0)
    leaked: SizeValue = SizeValue(0)
    dedup_ratio: float = 1.0
    vdevs: List[VdevGroup] = field(default_factory=list)
    
    def __post_init__(self):
        if not self.name:
            raise ValueError("Pool name cannot be empty")
    
    @property
    def capacity_percent(self) -> int:
        """Get capacity utilization as percentage."""
        if self.size.bytes == 0:
            return 0
        return int((self.allocated.bytes / self.size.bytes) * 100)
    
    def is_healthy(self) -> bool:
        return self.health == ZpoolState.ONLINE.value
    
    def devices(self) -> List[Vdev]:
        """All leaf devices in report order."""
        return [device for group in self.vdevs for device in group.devices]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert pool to dictionary representation."""
        return {
            'name': self.name,
            'health': self.health,
            'allocated': self.allocated.to_dict(),
            'size': self.size.to_dict(),
            'free': self.free.to_dict(),
            'capacity_percent': self.capacity_percent,
            'fragmentation_percent': self.fragmentation,
            'read_only': self.read_only,
            'freeing': self.freeing.to_dict(),
            'leaked': self.leaked.to_dict(),
            'dedup_ratio': self.dedup_ratio,
            'vdevs': [group.to_dict() for group in self.vdevs],
        }
    
    def __str__(self) -> str:
        return f"Zpool({self.name})"


@dataclass
class ExportedZpool:
    """A pool found on attached media that is not imported.

    Text fields stay ``None`` until the report provides them; ``None``
    status or action means the report had nothing to say.
    """
    
    name: str
    id: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    action: Optional[str] = None
    see: Optional[str] = None
    vdevs: List[VdevGroup] = field(default_factory=list)
    
    def is_destroyed(self) -> bool:
        """Destroyed pools need ``-D`` to be imported."""
        return self.state is not None and DESTROYED_MARKER in self.state
    
    def import_flags(self, try_force: bool = False) -> str:
        """Build the combined flag word, e.g. ``-N``, ``-Nf``, ``-NfD``.

        ``-N`` keeps the pool's datasets unmounted after the import.
        """
        flags = "-N"
        if try_force:
            flags += "f"
        if self.is_destroyed():
            flags += "D"
        return flags
    
    def import_args(self, try_force: bool = False) -> List[str]:
        """Arguments for ``zpool`` that import this pool by its identifier."""
        if not self.id:
            raise ValueError(f"Pool '{self.name}' has no identifier to import by")
        return ["import", self.import_flags(try_force), self.id]
    
    def devices(self) -> List[Vdev]:
        return [device for group in self.vdevs for device in group.devices]
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'id': self.id,
            'state': self.state,
            'status': self.status,
            'action': self.action,
            'see': self.see,
            'destroyed': self.is_destroyed(),
            'vdevs': [group.to_dict() for group in self.vdevs],
        }
    
    def __str__(self) -> str:
        return f"ExportedZpool({self.name}, id={self.id})"
