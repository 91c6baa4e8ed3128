"""
RBAC domain types: the closed role and permission sets, the immutable
role -> permission table and the per-request principal.
"""

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List


class Role(str, Enum):
    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_PROJECT_MANAGER = "ROLE_PROJECT_MANAGER"
    ROLE_DEVELOPER = "ROLE_DEVELOPER"
    ROLE_USER = "ROLE_USER"


class Permission(str, Enum):
    USER_READ = "USER_READ"
    USER_CREATE = "USER_CREATE"
    USER_UPDATE = "USER_UPDATE"
    USER_DELETE = "USER_DELETE"

    PRJ_READ = "PRJ_READ"
    PRJ_CREATE = "PRJ_CREATE"
    PRJ_UPDATE = "PRJ_UPDATE"
    PRJ_DELETE = "PRJ_DELETE"
    PRJ_MANAGE_MEMBERS = "PRJ_MANAGE_MEMBERS"

    TASK_READ = "TASK_READ"
    TASK_CREATE = "TASK_CREATE"
    TASK_UPDATE = "TASK_UPDATE"
    TASK_DELETE = "TASK_DELETE"
    TASK_ASSIGN = "TASK_ASSIGN"

    CMT_READ = "CMT_READ"
    CMT_CREATE = "CMT_CREATE"
    CMT_UPDATE = "CMT_UPDATE"
    CMT_DELETE = "CMT_DELETE"

    NOTI_READ = "NOTI_READ"
    NOTI_CREATE = "NOTI_CREATE"
    NOTI_UPDATE = "NOTI_UPDATE"
    NOTI_DELETE = "NOTI_DELETE"


def as_name(value) -> str:
    """Enum members and plain strings both map to the bare identifier."""
    if isinstance(value, Enum):
        return value.value
    return str(value)


class RolePermissionTable(Mapping):
    """
    Read-only mapping of role name -> frozenset of permission names.

    Keys and values are plain strings so lookups work the same for values
    coming from tokens and for Role/Permission members.
    """

    def __init__(self, roles: Mapping):
        entries: Dict[str, FrozenSet[str]] = {}
        for role, permissions in roles.items():
            entries[as_name(role)] = frozenset(as_name(p) for p in permissions)
        self._entries = MappingProxyType(entries)

    def __getitem__(self, role) -> FrozenSet[str]:
        return self._entries[as_name(role)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, role) -> bool:
        if not isinstance(role, (str, Enum)):
            return False
        return as_name(role) in self._entries

    def __repr__(self) -> str:
        return f"RolePermissionTable(roles={sorted(self._entries)}, version={self.version[:12]})"

    def permissions_for(self, role) -> FrozenSet[str]:
        """Permissions mapped to a role; empty for roles the table does not define."""
        if role not in self:
            return frozenset()
        return self._entries[as_name(role)]

    def to_dict(self) -> Dict[str, List[str]]:
        return {role: sorted(self._entries[role]) for role in sorted(self._entries)}

    @property
    def version(self) -> str:
        """Content fingerprint; equal tables have equal versions regardless of ordering."""
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()


@dataclass(frozen=True)
class Principal:
    """Authenticated actor of a single request."""
    subject: str = ""
    email: str = ""
    roles: FrozenSet[str] = field(default_factory=frozenset)
    granted_permissions: FrozenSet[str] = field(default_factory=frozenset)
