import pytest
from unittest.mock import call

from zpoolkit.zpool_operations.core.entities.pool import ExportedZpool, Zpool
from zpoolkit.zpool_operations.core.exceptions.zfs_exceptions import (
    ZpoolCommandError,
    ZpoolParseError,
    PoolException,
    PoolNotFoundError,
    ExportedPoolNotFoundError,
)
from zpoolkit.zpool_operations.parsers.pool_status_parser import zpool_get_args
from zpoolkit.zpool_operations.services.pool_service import PoolService
from tests.fixtures.zpool_output import (
    IMPORT_TWO_POOLS,
    IMPORT_DESTROYED_POOL,
    IMPORT_NO_POOLS,
    GET_TANK_PROPERTIES,
    STATUS_TANK,
    ok,
    failed,
)


class TestPoolService:
    """Test suite for PoolService."""
    
    @pytest.fixture
    def destroyed_pool(self):
        return ExportedZpool(name="oldtank", id="987654321", state="ONLINE (DESTROYED)")
    
    # list_exported_pools
    
    @pytest.mark.asyncio
    async def test_list_exported_pools_concatenates_both_reports(self, pool_service, mock_executor):
        """Regular report first, then the destroyed-pool report."""
        mock_executor.execute_zpool.side_effect = [
            ok(IMPORT_TWO_POOLS),
            ok(IMPORT_DESTROYED_POOL),
        ]
        
        result = await pool_service.list_exported_pools()
        
        assert result.is_success
        assert [p.name for p in result.value] == ["tank", "backup", "oldtank"]
        assert [p.is_destroyed() for p in result.value] == [False, False, True]
        assert mock_executor.execute_zpool.call_args_list == [call("import"), call("import", "-D")]
    
    @pytest.mark.asyncio
    async def test_list_exported_pools_nothing_to_import(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [ok(IMPORT_NO_POOLS), ok(IMPORT_NO_POOLS)]
        
        result = await pool_service.list_exported_pools()
        
        assert result.is_success
        assert result.value == []
    
    @pytest.mark.asyncio
    async def test_list_exported_pools_first_command_fails(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [failed("permission denied", returncode=2)]
        
        result = await pool_service.list_exported_pools()
        
        assert result.is_failure
        assert isinstance(result.error, ZpoolCommandError)
        assert result.error.exit_code == 2
        assert result.error.command == ["zpool", "import"]
        mock_executor.execute_zpool.assert_called_once_with("import")
    
    @pytest.mark.asyncio
    async def test_list_exported_pools_second_command_fails(self, pool_service, mock_executor):
        """No partial list when the destroyed-pool scan fails."""
        mock_executor.execute_zpool.side_effect = [
            ok(IMPORT_TWO_POOLS),
            failed("cannot discover pools"),
        ]
        
        result = await pool_service.list_exported_pools()
        
        assert result.is_failure
        assert isinstance(result.error, ZpoolCommandError)
        assert result.error.command == ["zpool", "import", "-D"]
        assert result.error.stderr == "cannot discover pools"
    
    @pytest.mark.asyncio
    async def test_command_failure_logged_with_error_details(self, pool_service, mock_executor, mock_logger):
        mock_executor.execute_zpool.return_value = failed("cannot discover pools", returncode=2)
        
        await pool_service.list_exported_pools()
        
        extra = mock_logger.warning.call_args.kwargs["extra"]
        assert extra["error"]["error_code"] == "ZPOOL_COMMAND_FAILED"
        assert extra["error"]["details"]["exit_code"] == 2
    
    @pytest.mark.asyncio
    async def test_list_exported_pools_unexpected_error(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = RuntimeError("boom")
        
        result = await pool_service.list_exported_pools()
        
        assert result.is_failure
        assert result.error.error_code == "POOL_IMPORT_LIST_UNEXPECTED_ERROR"
    
    # find_exported_pool
    
    @pytest.mark.asyncio
    async def test_find_exported_pool_by_id(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [ok(IMPORT_TWO_POOLS), ok(IMPORT_DESTROYED_POOL)]
        
        result = await pool_service.find_exported_pool("3417288211960417437")
        
        assert result.is_success
        assert result.value.name == "backup"
    
    @pytest.mark.asyncio
    async def test_find_exported_pool_unknown_id(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [ok(IMPORT_TWO_POOLS), ok(IMPORT_NO_POOLS)]
        
        result = await pool_service.find_exported_pool("42")
        
        assert result.is_failure
        assert isinstance(result.error, ExportedPoolNotFoundError)
        assert result.error.details == {"pool_id": "42"}
    
    # import_pool
    
    @pytest.mark.asyncio
    async def test_import_destroyed_pool_with_force(self, pool_service, mock_executor, destroyed_pool):
        mock_executor.execute_zpool.return_value = ok()
        
        result = await pool_service.import_pool(destroyed_pool, try_force=True)
        
        assert result.is_success
        assert result.value is True
        mock_executor.execute_zpool.assert_called_once_with("import", "-NfD", "987654321")
    
    @pytest.mark.asyncio
    async def test_import_destroyed_pool_without_force(self, pool_service, mock_executor, destroyed_pool):
        mock_executor.execute_zpool.return_value = ok()
        
        await pool_service.import_pool(destroyed_pool)
        
        mock_executor.execute_zpool.assert_called_once_with("import", "-ND", "987654321")
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("try_force,flags", [(False, "-N"), (True, "-Nf")])
    async def test_import_regular_pool(self, pool_service, mock_executor, try_force, flags):
        mock_executor.execute_zpool.return_value = ok()
        pool = ExportedZpool(name="tank", id="123", state="ONLINE")
        
        await pool_service.import_pool(pool, try_force=try_force)
        
        mock_executor.execute_zpool.assert_called_once_with("import", flags, "123")
    
    @pytest.mark.asyncio
    async def test_import_failure_returns_command_error(self, pool_service, mock_executor):
        stderr = "cannot import 'tank': pool was previously in use from another system."
        mock_executor.execute_zpool.return_value = failed(stderr)
        pool = ExportedZpool(name="tank", id="123", state="ONLINE")
        
        result = await pool_service.import_pool(pool)
        
        assert result.is_failure
        assert type(result.error) is ZpoolCommandError
        assert result.error.stderr == stderr
        assert result.error.exit_code == 1
        assert result.error.command == ["zpool", "import", "-N", "123"]
        mock_executor.execute_zpool.assert_called_once()
    
    @pytest.mark.asyncio
    async def test_import_without_id(self, pool_service, mock_executor):
        result = await pool_service.import_pool(ExportedZpool(name="tank"))
        
        assert result.is_failure
        assert isinstance(result.error, PoolException)
        assert result.error.error_code == "POOL_ID_MISSING"
        mock_executor.execute_zpool.assert_not_called()
    
    # get_pool / list_pools
    
    @pytest.mark.asyncio
    async def test_get_pool_success(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [ok(GET_TANK_PROPERTIES), ok(STATUS_TANK)]
        
        result = await pool_service.get_pool("tank")
        
        assert result.is_success
        pool = result.value
        assert isinstance(pool, Zpool)
        assert pool.name == "tank"
        assert pool.size == 10737418240
        assert [g.group.name for g in pool.vdevs] == ["mirror-0", "logs"]
        assert mock_executor.execute_zpool.call_args_list == [
            call(*zpool_get_args("tank")),
            call("status", "tank"),
        ]
    
    @pytest.mark.asyncio
    async def test_get_pool_not_found(self, pool_service, mock_executor):
        mock_executor.execute_zpool.return_value = failed("cannot open 'nope': no such pool")
        
        result = await pool_service.get_pool("nope")
        
        assert result.is_failure
        assert isinstance(result.error, PoolNotFoundError)
        assert result.error.error_code == "POOL_NOT_FOUND"
    
    @pytest.mark.asyncio
    async def test_get_pool_other_command_failure(self, pool_service, mock_executor):
        mock_executor.execute_zpool.return_value = failed("Command not found: zpool", returncode=127)
        
        result = await pool_service.get_pool("tank")
        
        assert result.is_failure
        assert isinstance(result.error, ZpoolCommandError)
        assert result.error.exit_code == 127
    
    @pytest.mark.asyncio
    async def test_get_pool_unparseable_properties(self, pool_service, mock_executor):
        mock_executor.execute_zpool.return_value = ok("tank\tsize\tgarbage\n")
        
        result = await pool_service.get_pool("tank")
        
        assert result.is_failure
        assert isinstance(result.error, ZpoolParseError)
        mock_executor.execute_zpool.assert_called_once()
    
    @pytest.mark.asyncio
    async def test_list_pools(self, pool_service, mock_executor):
        mock_executor.execute_zpool.side_effect = [
            ok("tank\n"),
            ok(GET_TANK_PROPERTIES),
            ok(STATUS_TANK),
        ]
        
        result = await pool_service.list_pools()
        
        assert result.is_success
        assert [p.name for p in result.value] == ["tank"]
        assert mock_executor.execute_zpool.call_args_list[0] == call("list", "-Ho", "name")
    
    @pytest.mark.asyncio
    async def test_list_pools_no_pools(self, pool_service, mock_executor):
        mock_executor.execute_zpool.return_value = ok("")
        
        result = await pool_service.list_pools()
        
        assert result.is_success
        assert result.value == []
    
    @pytest.mark.asyncio
    async def test_list_pools_failure(self, pool_service, mock_executor):
        mock_executor.execute_zpool.return_value = failed("internal error")
        
        result = await pool_service.list_pools()
        
        assert result.is_failure
        assert isinstance(result.error, ZpoolCommandError)
    
    def test_default_resolver_keeps_tokens(self, mock_executor, mock_logger):
        service = PoolService(executor=mock_executor, logger=mock_logger)
        
        assert service._resolve("sda") == "sda"
