"""
Core dependencies for route protection and permission checking
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.resolver_provider import get_permission_resolver
from app.modules.auth.claims import principal_from_claims
from app.modules.auth.service import TokenService
from app.modules.rbac.models import Principal, as_name
from app.modules.rbac.service import PermissionResolver
from typing import List, Set, Dict, Any
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def _get_request_cache(request: Request) -> Dict[str, Any]:
    """Return request-scoped cache for access data (principal, effective permissions)."""
    if not hasattr(request.state, "access_cache"):
        request.state.access_cache = {}
    return request.state.access_cache


def get_token_service() -> TokenService:
    return TokenService.from_settings()


def get_current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Security(security),
    token_service: TokenService = Depends(get_token_service)
) -> Principal:
    """Verify the bearer token and build the principal from its claims"""
    cache = _get_request_cache(request)
    if "principal" in cache:
        return cache["principal"]
    payload = token_service.decode_token(credentials.credentials)
    principal = principal_from_claims(payload)
    cache["principal"] = principal
    return principal


def get_effective_permissions(
    request: Request,
    principal: Principal = Depends(get_current_principal),
    resolver: PermissionResolver = Depends(get_permission_resolver)
) -> Set[str]:
    """Effective permission set of the caller, resolved once per request."""
    cache = _get_request_cache(request)
    if "permission_names" not in cache:
        cache["permission_names"] = resolver.resolve_permissions(
            principal.roles, principal.granted_permissions
        )
    return cache["permission_names"]


def _deny(principal: Principal, detail: str):
    logger.warning(f"User {principal.subject} denied: {detail}")
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def require_permission(required_permission):
    """Factory function to create permission check dependency"""
    required_permission = as_name(required_permission)

    def check_permission(
        principal: Principal = Depends(get_current_principal),
        effective: Set[str] = Depends(get_effective_permissions),
        resolver: PermissionResolver = Depends(get_permission_resolver)
    ) -> Principal:
        if not resolver.has_permission(effective, required_permission):
            _deny(principal, f"Insufficient permissions. Required: {required_permission}")
        return principal
    return check_permission


def require_any_permission(required_permissions: List):
    """Factory: at least one of the listed permissions. An empty list never passes."""
    required_permissions = [as_name(p) for p in required_permissions]

    def check_any_permission(
        principal: Principal = Depends(get_current_principal),
        effective: Set[str] = Depends(get_effective_permissions),
        resolver: PermissionResolver = Depends(get_permission_resolver)
    ) -> Principal:
        if not resolver.has_any_permission(effective, required_permissions):
            _deny(principal, f"Insufficient permissions. Required one of: {', '.join(required_permissions)}")
        return principal
    return check_any_permission


def require_all_permissions(required_permissions: List):
    """Factory: every listed permission"""
    required_permissions = [as_name(p) for p in required_permissions]

    def check_all_permissions(
        principal: Principal = Depends(get_current_principal),
        effective: Set[str] = Depends(get_effective_permissions),
        resolver: PermissionResolver = Depends(get_permission_resolver)
    ) -> Principal:
        if not resolver.has_all_permissions(effective, required_permissions):
            missing = sorted(set(required_permissions) - effective)
            _deny(principal, f"Insufficient permissions. Required: {', '.join(missing)}")
        return principal
    return check_all_permissions

