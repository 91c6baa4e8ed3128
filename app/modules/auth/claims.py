"""
Token claim extraction.

Issuers put roles in the payload either as ``role`` (single string, the
current format) or ``roles`` (list, the forward-compatible format). The claim
is parsed into one of the tagged variants below and normalised to a frozenset
before it reaches the resolver.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple, Union

from app.modules.rbac.models import Principal


@dataclass(frozen=True)
class SingleRole:
    role: str

    def to_set(self) -> FrozenSet[str]:
        return frozenset({self.role})


@dataclass(frozen=True)
class RoleList:
    roles: Tuple[str, ...]

    def to_set(self) -> FrozenSet[str]:
        return frozenset(self.roles)


@dataclass(frozen=True)
class NoRole:
    def to_set(self) -> FrozenSet[str]:
        return frozenset()


RoleClaim = Union[SingleRole, RoleList, NoRole]


def parse_role_claim(payload: Dict[str, Any]) -> RoleClaim:
    """A non-empty ``roles`` list wins over ``role``; anything else means no roles"""
    roles = payload.get("roles")
    if isinstance(roles, list) and roles:
        return RoleList(tuple(r for r in roles if isinstance(r, str)))

    role = payload.get("role")
    if isinstance(role, str):
        return SingleRole(role)

    return NoRole()


def extract_roles(payload: Dict[str, Any]) -> FrozenSet[str]:
    return parse_role_claim(payload).to_set()


def extract_granted_permissions(payload: Dict[str, Any]) -> FrozenSet[str]:
    permissions = payload.get("permissions")
    if not isinstance(permissions, list):
        return frozenset()
    return frozenset(p for p in permissions if isinstance(p, str))


def principal_from_claims(payload: Dict[str, Any]) -> Principal:
    return Principal(
        subject=str(payload.get("sub") or ""),
        email=str(payload.get("email") or ""),
        roles=extract_roles(payload),
        granted_permissions=extract_granted_permissions(payload),
    )
