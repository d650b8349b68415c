"""
Concrete implementation of command executor interface.
"""
import asyncio
import logging
from typing import List
from ..core.interfaces.command_executor import ICommandExecutor, CommandResult


class CommandExecutor(ICommandExecutor):
    """Runs the zpool tool as a child process, without a shell."""
    
    def __init__(self, binary: str = "zpool", timeout: int = 30):
        self.binary = binary
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
    
    async def execute_zpool(self, *args: str) -> CommandResult:
        """Execute zpool with the given arguments."""
        return await self._execute_command([self.binary] + list(args))
    
    async def _execute_command(self, command: List[str]) -> CommandResult:
        """Execute command with proper error handling."""
        try:
            self.logger.debug(f"Executing command: {' '.join(command)}")
            
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=1024*1024  # 1MB limit
            )
            
            try:
                stdout, stderr = await asyncio.wait_for(
                    process.communicate(),
                    timeout=self.timeout
                )
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
                return CommandResult(
                    success=False,
                    returncode=124,  # Timeout exit code
                    stdout="",
                    stderr=f"Command timed out after {self.timeout} seconds"
                )
            
            stdout_str = stdout.decode('utf-8', errors='replace')
            stderr_str = stderr.decode('utf-8', errors='replace').strip()
            
            success = process.returncode == 0
            
            if not success:
                self.logger.warning(
                    f"Command failed with exit code {process.returncode}: {stderr_str}"
                )
            
            return CommandResult(
                success=success,
                returncode=process.returncode if process.returncode is not None else 1,
                stdout=stdout_str,
                stderr=stderr_str
            )
            
        except FileNotFoundError:
            self.logger.error(f"Command not found: {command[0]}")
            return CommandResult(
                success=False,
                returncode=127,
                stdout="",
                stderr=f"Command not found: {command[0]}"
            )
        except OSError as e:
            self.logger.error(f"Command execution failed: {str(e)}")
            return CommandResult(
                success=False,
                returncode=1,
                stdout="",
                stderr=f"Command execution failed: {str(e)}"
            )
