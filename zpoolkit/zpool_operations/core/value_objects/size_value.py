from dataclasses import dataclass
import re
from typing import Union


@dataclass(frozen=True)
class SizeValue:
    """Size value object with unit handling"""
    bytes: int
    
    def __post_init__(self):
        if self.bytes < 0:
            raise ValueError("Size cannot be negative")
    
    @classmethod
    def from_zpool_value(cls, raw: str) -> 'SizeValue':
        """Parse a size as printed by ``zpool get -p`` (plain bytes) or
        without ``-p`` (e.g. '1.5G', '500M'). A '-' means no value."""
        raw = raw.strip()
        if raw.isdigit():
            return cls(int(raw))
        return cls.from_zfs_string(raw)
    
    @classmethod
    def from_zfs_string(cls, size_str: str) -> 'SizeValue':
        """Parse ZFS size string (e.g., '1.5G', '500M') to bytes"""
        size_str = size_str.strip().upper()
        
        if size_str in ["-", "0", "0B"]:
            return cls(0)
        
        units = {
            "B": 1,
            "K": 1024,
            "M": 1024**2,
            "G": 1024**3,
            "T": 1024**4,
            "P": 1024**5,
            "E": 1024**6,
        }
        
        match = re.match(r'^(\d+(?:\.\d+)?)\s*([BKMGTPE]?)$', size_str)
        if not match:
            raise ValueError(f"Cannot parse size: {size_str}")
        
        numeric_value = float(match.group(1))
        unit = match.group(2) or "B"
        return cls(int(numeric_value * units[unit]))
    
    def to_human_readable(self, precision: int = 1) -> str:
        """Convert bytes to human readable format"""
        if self.bytes == 0:
            return "0B"
        
        units = ["B", "K", "M", "G", "T", "P", "E"]
        size = float(self.bytes)
        unit_index = 0
        
        while size >= 1024 and unit_index < len(units) - 1:
            size /= 1024
            unit_index += 1
        
        if size == int(size):
            return f"{int(size)}{units[unit_index]}"
        
        return f"{size:.{precision}f}{units[unit_index]}"
    
    def __str__(self) -> str:
        return self.to_human_readable()
    
    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self.bytes == other
        if isinstance(other, SizeValue):
            return self.bytes == other.bytes
        return NotImplemented
    
    def __hash__(self) -> int:
        return hash(self.bytes)
    
    def __lt__(self, other: Union['SizeValue', int]) -> bool:
        if isinstance(other, int):
            return self.bytes < other
        return self.bytes < other.bytes
    
    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'bytes': self.bytes,
            'human_readable': self.to_human_readable(),
        }
