"""
Resolution of raw device tokens from zpool reports to device paths.
"""
import os
from typing import Iterable, List

DEFAULT_SEARCH_PATHS = ["/dev", "/dev/disk/by-id", "/dev/disk/by-path"]


class DeviceResolver:
    """Turns a token such as ``sda`` or ``ata-WDC_WD40...`` into a path.

    Absolute paths are kept as they are. Otherwise the first search
    directory containing an entry of that name wins; tokens that match
    nothing (group names, missing disks, GUIDs) come back unchanged.
    """
    
    def __init__(self, search_paths: Iterable[str] = DEFAULT_SEARCH_PATHS):
        self.search_paths: List[str] = list(search_paths)
    
    def resolve(self, token: str) -> str:
        if not token or os.path.isabs(token):
            return token
        for directory in self.search_paths:
            candidate = os.path.join(directory, token)
            if os.path.exists(candidate):
                return candidate
        return token
    
    def __call__(self, token: str) -> str:
        return self.resolve(token)
