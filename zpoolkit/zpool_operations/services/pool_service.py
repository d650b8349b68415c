from typing import List, Optional

from ..core.interfaces.command_executor import ICommandExecutor
from ..core.interfaces.logger_interface import ILogger
from ..core.entities.pool import Zpool, ExportedZpool
from ..core.exceptions.zfs_exceptions import (
    ZFSException,
    ZpoolCommandError,
    PoolException,
    PoolNotFoundError,
    ExportedPoolNotFoundError,
)
from ..core.result import Result
from ..parsers.common import DeviceResolver, identity_resolver
from ..parsers.exported_pool_parser import parse_exported_pools
from ..parsers.pool_status_parser import (
    parse_property_line,
    parse_status_vdevs,
    zpool_get_args,
)

Lines = List[List[str]]


class PoolService:
    """Service for listing, inspecting and importing ZFS pools."""
    
    def __init__(self,
                 executor: ICommandExecutor,
                 logger: ILogger,
                 resolver: Optional[DeviceResolver] = None):
        self._executor = executor
        self._logger = logger
        self._resolve = resolver or identity_resolver
    
    async def get_pool(self, pool_name: str) -> Result[Zpool, ZFSException]:
        """Get properties and device tree of an imported pool."""
        try:
            self._logger.info(f"Fetching pool: {pool_name}")
            
            output = await self._zpool_output(*zpool_get_args(pool_name))
            if output.is_failure:
                return Result.failure(self._not_found_or(output.error, pool_name))
            
            pool = Zpool(name=pool_name)
            for line in output.value:
                parse_property_line(pool, line)
            
            # Retrieve details of associated vdevs
            output = await self._zpool_output("status", pool_name)
            if output.is_failure:
                return Result.failure(self._not_found_or(output.error, pool_name))
            parse_status_vdevs(pool, output.value, self._resolve)
            
            self._logger.info(f"Successfully fetched pool: {pool_name}")
            return Result.success(pool)
            
        except ZFSException as e:
            self._logger.warning(f"Failed to parse pool {pool_name}: {e}")
            return Result.failure(e)
        except Exception as e:
            self._logger.error(f"Unexpected error fetching pool {pool_name}: {e}")
            return Result.failure(PoolException(
                f"Unexpected error: {str(e)}",
                error_code="POOL_UNEXPECTED_ERROR"
            ))
    
    async def list_pools(self) -> Result[List[Zpool], ZFSException]:
        """List all pools imported on this system."""
        self._logger.info("Listing all pools")
        
        output = await self._zpool_output("list", "-Ho", "name")
        if output.is_failure:
            return Result.failure(output.error)
        
        pools = []
        for line in output.value:
            if not line:
                continue
            pool_result = await self.get_pool(line[0])
            if pool_result.is_failure:
                return Result.failure(pool_result.error)
            pools.append(pool_result.value)
        
        self._logger.info(f"Successfully listed {len(pools)} pools")
        return Result.success(pools)
    
    async def list_exported_pools(self) -> Result[List[ExportedZpool], ZFSException]:
        """List pools that can be imported, including destroyed ones.

        Runs ``zpool import`` then ``zpool import -D``; if either fails the
        whole call fails and nothing is returned.
        """
        try:
            self._logger.info("Listing importable pools")
            
            pools: List[ExportedZpool] = []
            for args in (("import",), ("import", "-D")):
                output = await self._zpool_output(*args)
                if output.is_failure:
                    return Result.failure(output.error)
                pools.extend(parse_exported_pools(output.value, self._resolve))
            
            self._logger.info(f"Found {len(pools)} importable pools")
            return Result.success(pools)
            
        except Exception as e:
            self._logger.error(f"Unexpected error listing importable pools: {e}")
            return Result.failure(PoolException(
                f"Unexpected error: {str(e)}",
                error_code="POOL_IMPORT_LIST_UNEXPECTED_ERROR"
            ))
    
    async def find_exported_pool(self, pool_id: str) -> Result[ExportedZpool, ZFSException]:
        """Look up an importable pool by its numeric identifier."""
        listed = await self.list_exported_pools()
        if listed.is_failure:
            return Result.failure(listed.error)
        
        for pool in listed.value:
            if pool.id == pool_id:
                return Result.success(pool)
        return Result.failure(ExportedPoolNotFoundError(pool_id))
    
    async def import_pool(self, pool: ExportedZpool, try_force: bool = False) -> Result[bool, ZFSException]:
        """Import an exported pool by identifier without mounting its datasets.

        A failing ``zpool import`` is returned as its ZpoolCommandError,
        unchanged; retrying with ``try_force`` is left to the caller.
        """
        try:
            args = pool.import_args(try_force)
        except ValueError as e:
            return Result.failure(PoolException(str(e), error_code="POOL_ID_MISSING"))
        
        self._logger.info(
            f"Importing pool: {pool.name} (id={pool.id}, force={try_force}, destroyed={pool.is_destroyed()})"
        )
        output = await self._zpool_output(*args)
        if output.is_failure:
            return Result.failure(output.error)
        
        self._logger.info(f"Successfully imported pool: {pool.name}")
        return Result.success(True)
    
    # Private helper methods
    
    async def _zpool_output(self, *args: str) -> Result[Lines, ZpoolCommandError]:
        """Run zpool and return its stdout as tokenized lines."""
        result = await self._executor.execute_zpool(*args)
        if not result.success:
            error = ZpoolCommandError(["zpool", *args], result.returncode, result.stderr)
            self._logger.warning(f"zpool {' '.join(args)} failed", extra={"error": error.to_dict()})
            return Result.failure(error)
        return Result.success(result.lines())
    
    def _not_found_or(self, error: ZpoolCommandError, pool_name: str) -> ZFSException:
        if "no such pool" in error.stderr.lower():
            return PoolNotFoundError(pool_name)
        return error
