from abc import ABC, abstractmethod
from typing import List, Optional
from dataclasses import dataclass


@dataclass
class CommandResult:
    """Result of a command execution"""
    returncode: int
    stdout: str
    stderr: str
    success: Optional[bool] = None
    
    def __post_init__(self):
        if self.success is None:
            self.success = self.returncode == 0
    
    def lines(self) -> List[List[str]]:
        """Tokenize stdout: one entry per line, whitespace-split.

        A blank line yields an empty list rather than being dropped.
        """
        if not self.stdout:
            return []
        return [line.split() for line in self.stdout.splitlines()]


class ICommandExecutor(ABC):
    """Interface for running the zpool tool"""
    
    @abstractmethod
    async def execute_zpool(self, *args: str) -> CommandResult:
        """Execute zpool with the given arguments"""
        pass
