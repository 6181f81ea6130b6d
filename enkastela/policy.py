"""Field-level access control: which roles may encrypt or decrypt which fields.

Roles, tables and columns are compared case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FieldId:
    """A field identified by table and column, stored lowercased."""

    table: str
    column: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", self.table.lower())
        object.__setattr__(self, "column", self.column.lower())


class Permission(Enum):
    """Permission level on a field."""

    DECRYPT = "decrypt"
    ENCRYPT = "encrypt"
    FULL = "full"
    DENY = "deny"


def _satisfies(granted: Permission, required: Permission) -> bool:
    if granted is Permission.FULL:
        return True
    return granted is required and granted in (Permission.DECRYPT, Permission.ENCRYPT)


class AccessPolicy:
    """Maps roles to per-field permissions, plus roles with access to everything."""

    def __init__(self) -> None:
        self._grants: dict[str, dict[FieldId, Permission]] = {}
        self._admin_roles: set[str] = set()

    def grant(self, role: str, table: str, column: str, permission: Permission) -> None:
        """Give ``role`` the ``permission`` on ``table.column``, replacing any earlier grant."""
        self._grants.setdefault(role.lower(), {})[FieldId(table, column)] = permission

    def grant_admin(self, role: str) -> None:
        """Give ``role`` every permission on every field."""
        self._admin_roles.add(role.lower())

    def check(self, role: str, table: str, column: str, required: Permission) -> bool:
        """Return whether ``role`` holds ``required`` on ``table.column``."""
        role = role.lower()
        if role in self._admin_roles:
            return True
        granted = self._grants.get(role, {}).get(FieldId(table, column))
        return granted is not None and _satisfies(granted, required)

    def can_decrypt(self, role: str, table: str, column: str) -> bool:
        """Return whether ``role`` may decrypt ``table.column``."""
        return self.check(role, table, column, Permission.DECRYPT)

    def can_encrypt(self, role: str, table: str, column: str) -> bool:
        """Return whether ``role`` may encrypt ``table.column``."""
        return self.check(role, table, column, Permission.ENCRYPT)

    def decryptable_fields(self, role: str) -> list[FieldId]:
        """Return the fields explicitly granted to ``role`` for decryption."""
        return [
            field
            for field, perm in self._grants.get(role.lower(), {}).items()
            if perm in (Permission.DECRYPT, Permission.FULL)
        ]