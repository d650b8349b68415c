"""
zpoolkit configuration module

Loads settings from environment variables into small dataclass sections.
Every key may also be given with a ``ZPOOLKIT_`` prefix.
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, List

from .zpool_operations.infrastructure.device_resolver import DEFAULT_SEARCH_PATHS

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ZpoolConfig:
    """How the zpool tool is invoked"""
    binary: str = "zpool"
    command_timeout: int = 30
    log_level: str = "INFO"
    device_search_paths: List[str] = field(default_factory=lambda: list(DEFAULT_SEARCH_PATHS))


@dataclass
class ServerConfig:
    """HTTP API settings"""
    host: str = "127.0.0.1"
    port: int = 8000
    enable_docs: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


class ZpoolKitConfig:
    """
    Configuration loaded from environment variables.
    
    Values are converted to the dataclass field types and validated;
    invalid values raise ValueError at load time.
    """
    
    def __init__(self):
        self.zpool = ZpoolConfig()
        self.server = ServerConfig()
        
        self._load_environment_variables()
        self._validate_configuration()
    
    def _load_environment_variables(self):
        # ==== ZPOOL CONFIG ====
        self.zpool.binary = self._get_string("ZPOOL_BINARY", self.zpool.binary)
        self.zpool.command_timeout = self._get_int("COMMAND_TIMEOUT", self.zpool.command_timeout)
        self.zpool.log_level = self._get_string("LOG_LEVEL", self.zpool.log_level).upper()
        self.zpool.device_search_paths = self._get_list(
            "DEVICE_SEARCH_PATHS", self.zpool.device_search_paths
        )
        
        # ==== SERVER CONFIG ====
        self.server.host = self._get_string("HOST", self.server.host)
        self.server.port = self._get_int("PORT", self.server.port)
        self.server.enable_docs = self._get_bool("ENABLE_DOCS", self.server.enable_docs)
        self.server.cors_origins = self._get_list("CORS_ORIGINS", self.server.cors_origins)
    
    def _lookup(self, key: str):
        for prefix in ["", "ZPOOLKIT_"]:
            value = os.getenv(f"{prefix}{key}")
            if value is not None:
                return value
        return None
    
    def _get_string(self, key: str, default: str) -> str:
        value = self._lookup(key)
        return value if value is not None else default
    
    def _get_int(self, key: str, default: int) -> int:
        value = self._lookup(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got '{value}'")
    
    def _get_bool(self, key: str, default: bool) -> bool:
        value = self._lookup(key)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")
    
    def _get_list(self, key: str, default: List[str]) -> List[str]:
        value = self._lookup(key)
        if value is None:
            return list(default)
        return [item.strip() for item in value.split(",") if item.strip()]
    
    def _validate_configuration(self):
        if self.zpool.command_timeout <= 0:
            raise ValueError("COMMAND_TIMEOUT must be positive")
        if self.zpool.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_VALID_LOG_LEVELS)}")
        if not 0 < self.server.port < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        if not self.zpool.binary:
            raise ValueError("ZPOOL_BINARY cannot be empty")
    
    def to_service_config(self) -> Dict[str, Any]:
        """Settings consumed by the service factory."""
        return {
            'zpool_binary': self.zpool.binary,
            'command_timeout': self.zpool.command_timeout,
            'log_level': self.zpool.log_level,
            'device_search_paths': list(self.zpool.device_search_paths),
        }


@lru_cache()
def get_config() -> ZpoolKitConfig:
    """Get the process-wide configuration."""
    return ZpoolKitConfig()
