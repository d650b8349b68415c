import pytest

from zpoolkit.zpool_operations.core.exceptions.zfs_exceptions import ZpoolCommandError
from zpoolkit.zpool_operations.core.result import Result


class TestResult:

    def test_success(self):
        result = Result.success([1, 2])

        assert result.is_success
        assert not result.is_failure
        assert result.value == [1, 2]
        with pytest.raises(ValueError):
            _ = result.error

    def test_failure(self):
        error = ZpoolCommandError(["zpool", "import"], 1, "boom")
        result = Result.failure(error)

        assert result.is_failure
        assert result.error is error
        with pytest.raises(ValueError):
            _ = result.value

    def test_requires_exactly_one_side(self):
        with pytest.raises(ValueError):
            Result()


class TestZpoolCommandError:

    def test_message_and_details(self):
        error = ZpoolCommandError(["zpool", "import", "-N", "123"], 1, "no pools available")

        assert str(error) == "zpool command failed (exit code 1): zpool import -N 123: no pools available"
        assert error.to_dict() == {
            "error_type": "ZpoolCommandError",
            "message": str(error),
            "error_code": "ZPOOL_COMMAND_FAILED",
            "details": {
                "command": ["zpool", "import", "-N", "123"],
                "exit_code": 1,
                "stderr": "no pools available",
            },
        }
