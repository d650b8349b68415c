from typing import Dict, Any, Optional, List


class ZFSException(Exception):
    """Base exception for all zpool operations"""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization"""
        return {
            'error_type': self.__class__.__name__,
            'message': str(self),
            'error_code': self.error_code,
            'details': self.details
        }


class ZpoolCommandError(ZFSException):
    """The zpool tool could not be run or exited non-zero"""
    
    def __init__(self, command: List[str], exit_code: int, stderr: str = ""):
        message = f"zpool command failed (exit code {exit_code}): {' '.join(command)}"
        if stderr:
            message += f": {stderr}"
        super().__init__(
            message,
            error_code="ZPOOL_COMMAND_FAILED",
            details={
                "command": list(command),
                "exit_code": exit_code,
                "stderr": stderr
            }
        )
        self.command = list(command)
        self.exit_code = exit_code
        self.stderr = stderr


class ZpoolParseError(ZFSException):
    """zpool output could not be interpreted"""
    
    def __init__(self, reason: str, line: Optional[List[str]] = None):
        message = f"Failed to parse zpool output: {reason}"
        super().__init__(
            message,
            error_code="ZPOOL_PARSE_FAILED",
            details={"reason": reason, "line": line}
        )


class PoolException(ZFSException):
    """Pool-related exceptions"""
    pass


class PoolNotFoundError(PoolException):
    """Pool not found exception"""
    
    def __init__(self, pool_name: str):
        super().__init__(
            f"Pool '{pool_name}' not found",
            error_code="POOL_NOT_FOUND",
            details={"pool_name": pool_name}
        )


class ExportedPoolNotFoundError(PoolException):
    """No importable pool carries the requested identifier"""
    
    def __init__(self, pool_id: str):
        super().__init__(
            f"No importable pool with id '{pool_id}'",
            error_code="EXPORTED_POOL_NOT_FOUND",
            details={"pool_id": pool_id}
        )
