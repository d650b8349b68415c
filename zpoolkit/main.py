#!/usr/bin/env python3
"""
zpoolkit API service

FastAPI application exposing attached and importable pools.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_config
from .api.routers import pool_router

config = get_config()

logging.basicConfig(
    level=getattr(logging, config.zpool.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting zpoolkit API service (zpool binary: {config.zpool.binary})")
    yield
    logger.info("Shutting down zpoolkit API service")


app = FastAPI(
    title="zpoolkit API",
    description="Inspect ZFS pools and import exported or destroyed ones",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if config.server.enable_docs else None,
    redoc_url="/redoc" if config.server.enable_docs else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
)

app.include_router(pool_router)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": "zpoolkit",
        "version": __version__,
        "docs": "/docs" if config.server.enable_docs else None,
        "pools": "/api/v1/pools",
        "importable": "/api/v1/pools/importable",
    }


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
