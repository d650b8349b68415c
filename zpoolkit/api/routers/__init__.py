"""
API routers for zpoolkit.
"""

from .pool_router import router as pool_router

__all__ = ["pool_router"]
