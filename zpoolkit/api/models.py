"""
Pydantic models for API request/response validation.
"""
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """Base API response model."""
    success: bool
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class PoolResponse(APIResponse):
    """Single attached pool."""
    pool: Optional[Dict[str, Any]] = None


class PoolListResponse(BaseModel):
    """Response model for listing attached pools."""
    success: bool
    pools: List[Dict[str, Any]]
    count: int


class ExportedPoolListResponse(BaseModel):
    """Response model for listing importable pools."""
    success: bool
    pools: List[Dict[str, Any]]
    count: int


class ImportPoolRequest(BaseModel):
    """Request model for importing an exported pool."""
    force: bool = Field(default=False, description="Pass -f to zpool import")
