"""Configuration records and the host information records served as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class UserConfig:
    """Credentials for a user."""

    username: str = ""
    password: str = ""


@dataclass
class DatabaseConfig:
    """Settings for the database connection."""

    database_type: str = ""
    conn_path: str = ""
    path: str = ""
    host: str = ""
    port: int = 0
    auth_source: str = ""
    auth_type: str = ""
    description: UserConfig = field(default_factory=UserConfig)
    base_name: str = ""


@dataclass
class LoginConfig:
    """Credentials for logging in to the service."""

    user: UserConfig = field(default_factory=UserConfig)


@dataclass
class ServiceConfig:
    """Top-level service configuration."""

    port: int = 0
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    login: LoginConfig = field(default_factory=LoginConfig)


def _json(name: str) -> dict[str, str]:
    return {"json": name}


def _record_dict(record: Any) -> dict[str, Any]:
    """Map a record's fields to their JSON names, copying lists."""
    result = {}
    for item in fields(record):
        value = getattr(record, item.name)
        result[item.metadata.get("json", item.name)] = (
            list(value) if isinstance(value, list) else value
        )
    return result


@dataclass
class CPU:
    """One logical CPU as reported by the host."""

    number: int = 0
    model_name: str = field(default="", metadata=_json("modelName"))
    cores: int = 0
    mhz: float = 0.0
    cache_size: int = field(default=0, metadata=_json("cacheSize"))
    percent: float = 0.0
    flags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this record."""
        return _record_dict(self)


@dataclass
class MemoryInfo:
    """Virtual memory figures, sizes in megabytes."""

    total: int = field(default=0, metadata=_json("total_mb"))
    available: int = field(default=0, metadata=_json("available_mb"))
    used: int = field(default=0, metadata=_json("used_mb"))
    used_percent: float = 0.0
    free: int = field(default=0, metadata=_json("free_mb"))
    cached: int = field(default=0, metadata=_json("cached_mb"))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this record."""
        return _record_dict(self)


@dataclass
class DiskInfo:
    """Usage of one mounted partition, sizes in megabytes."""

    total: int = 0
    available: int = 0
    used: int = 0
    used_percent: float = 0.0
    free: int = 0
    name: str = ""
    mountpoint: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this record."""
        return _record_dict(self)


@dataclass
class NetworkInfo:
    """A network interface and its addresses."""

    name: str = ""
    address: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this record."""
        return _record_dict(self)


@dataclass
class NodeInfo:
    """Host and operating-system identification."""

    hostname: str = ""
    os: str = ""
    platform: str = ""
    platform_version: str = ""
    kernel_version: str = ""
    arch: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of this record."""
        return _record_dict(self)