"""Configuration for a vault instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional


@dataclass
class EnkastelaConfig:
    """Settings for a vault: connection, caching, auditing and limits."""

    database_url: Optional[str] = None
    require_tls: bool = True
    auto_migrate: bool = True
    cache_ttl: timedelta = field(default_factory=lambda: timedelta(minutes=5))
    cache_max_entries: int = 1000
    audit_enabled: bool = True
    schema: str = "enkastela"
    max_payload_size: int = 16 * 1024 * 1024