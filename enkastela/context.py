"""Access context carrying the caller's identity for access-control decisions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class AccessContext:
    """The caller's role, with an optional identifier and reason for the audit trail."""

    role: str
    caller_id: Optional[str] = None
    reason: Optional[str] = None

    def with_caller(self, caller_id: str) -> AccessContext:
        """Return a copy with the caller identifier set."""
        return replace(self, caller_id=caller_id)

    def with_reason(self, reason: str) -> AccessContext:
        """Return a copy with the access reason set."""
        return replace(self, reason=reason)