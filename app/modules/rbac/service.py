import logging
from typing import Callable, FrozenSet, Iterable, Optional, Set

from app.modules.rbac.models import RolePermissionTable, as_name

logger = logging.getLogger(__name__)


class PermissionResolver:
    """
    Computes effective permission sets from a fixed role -> permission table.

    Unknown roles contribute nothing. Every such exclusion is logged and, when
    given, reported to ``on_unknown_role`` so role-table drift between the
    token issuer and this service stays visible.
    """

    def __init__(self, table: RolePermissionTable, on_unknown_role: Optional[Callable[[str], None]] = None):
        self.table = table
        self.on_unknown_role = on_unknown_role

    def resolve_permissions(self, roles: Iterable = (), granted_permissions: Iterable = ()) -> Set[str]:
        """Union of the permissions of every role plus the directly granted ones"""
        effective: Set[str] = set()
        for role in roles:
            name = as_name(role)
            if name not in self.table:
                self._report_unknown_role(name)
                continue
            effective |= self.table.permissions_for(name)
        effective.update(as_name(p) for p in granted_permissions)
        return effective

    def has_permission(self, effective: Iterable, required) -> bool:
        if not isinstance(effective, (set, frozenset)):
            effective = {as_name(p) for p in effective}
        return as_name(required) in effective

    def has_any_permission(self, effective: Iterable, required: Iterable) -> bool:
        """False when nothing is required: no sufficient permission was demonstrated"""
        if not isinstance(effective, (set, frozenset)):
            effective = {as_name(p) for p in effective}
        return any(as_name(p) in effective for p in required)

    def has_all_permissions(self, effective: Iterable, required: Iterable) -> bool:
        """True when nothing is required"""
        if not isinstance(effective, (set, frozenset)):
            effective = {as_name(p) for p in effective}
        return all(as_name(p) in effective for p in required)

    def permissions_for_role(self, role) -> FrozenSet[str]:
        return self.table.permissions_for(role)

    def role_exists(self, role) -> bool:
        return role in self.table

    def role_names(self) -> FrozenSet[str]:
        return frozenset(self.table)

    def role_has_permission(self, role, permission) -> bool:
        return as_name(permission) in self.table.permissions_for(role)

    def _report_unknown_role(self, role: str) -> None:
        logger.warning(
            f"Ignoring unknown role '{role}' (table version {self.table.version[:12]}); "
            f"known roles: {sorted(self.table)}"
        )
        if self.on_unknown_role is not None:
            self.on_unknown_role(role)
