"""
Pool API router.
"""
import logging
from fastapi import APIRouter, HTTPException, Depends

from ..dependencies import get_pool_service
from ..models import (
    APIResponse,
    PoolResponse,
    PoolListResponse,
    ExportedPoolListResponse,
    ImportPoolRequest,
)
from ...zpool_operations.core.exceptions.zfs_exceptions import (
    PoolNotFoundError,
    ExportedPoolNotFoundError,
)
from ...zpool_operations.services.pool_service import PoolService

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/v1/pools", tags=["pools"])


@router.get("/", response_model=PoolListResponse)
async def list_pools(
    pool_service: PoolService = Depends(get_pool_service)
):
    """List all imported pools."""
    result = await pool_service.list_pools()
    if result.is_failure:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list pools: {result.error}"
        )
    
    pools = [pool.to_dict() for pool in result.value]
    return PoolListResponse(success=True, pools=pools, count=len(pools))


@router.get("/importable", response_model=ExportedPoolListResponse)
async def list_importable_pools(
    pool_service: PoolService = Depends(get_pool_service)
):
    """List pools that can be imported, destroyed ones included."""
    result = await pool_service.list_exported_pools()
    if result.is_failure:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list importable pools: {result.error}"
        )
    
    pools = [pool.to_dict() for pool in result.value]
    return ExportedPoolListResponse(success=True, pools=pools, count=len(pools))


@router.post("/importable/{pool_id}/import", response_model=APIResponse)
async def import_pool(
    pool_id: str,
    request: ImportPoolRequest,
    pool_service: PoolService = Depends(get_pool_service)
):
    """Import an exported pool by its numeric identifier."""
    found = await pool_service.find_exported_pool(pool_id)
    if found.is_failure:
        status_code = 404 if isinstance(found.error, ExportedPoolNotFoundError) else 500
        raise HTTPException(status_code=status_code, detail=str(found.error))
    
    pool = found.value
    result = await pool_service.import_pool(pool, try_force=request.force)
    if result.is_failure:
        logger.warning(f"Import of pool {pool.name} ({pool_id}) failed: {result.error}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to import pool: {result.error}"
        )
    
    return APIResponse(
        success=True,
        message=f"Pool {pool.name} imported",
        data={"pool": pool.to_dict()}
    )


@router.get("/{pool_name}", response_model=PoolResponse)
async def get_pool(
    pool_name: str,
    pool_service: PoolService = Depends(get_pool_service)
):
    """Get information about a specific pool."""
    result = await pool_service.get_pool(pool_name)
    if result.is_failure:
        status_code = 404 if isinstance(result.error, PoolNotFoundError) else 500
        raise HTTPException(status_code=status_code, detail=str(result.error))
    
    return PoolResponse(success=True, pool=result.value.to_dict())
