from fastapi import APIRouter, Depends, HTTPException, status
from app.config.permissions_config import PERMISSION_MATRIX, ROLE_DESCRIPTIONS
from app.core.dependencies import (
    get_current_principal,
    get_effective_permissions,
    require_permission,
    require_all_permissions,
)
from app.core.resolver_provider import get_permission_resolver
from app.modules.rbac.models import Permission, Principal
from app.modules.rbac.schemas import (
    PermissionResponse, RoleResponse, RoleTableResponse,
    ResolveRequest, EffectivePermissionsResponse,
    PermissionCheckRequest, PermissionCheckResponse
)
from app.modules.rbac.service import PermissionResolver
from typing import List, Optional, Set

router = APIRouter(prefix="/rbac", tags=["rbac"])


def _role_response(resolver: PermissionResolver, role: str) -> RoleResponse:
    return RoleResponse(
        name=role,
        description=ROLE_DESCRIPTIONS.get(role),
        permissions=sorted(resolver.permissions_for_role(role))
    )


@router.get("/roles", response_model=RoleTableResponse)
async def list_roles(
    principal: Principal = Depends(require_permission(Permission.USER_READ)),
    resolver: PermissionResolver = Depends(get_permission_resolver)
):
    """List every role of the active table with its permissions"""
    return RoleTableResponse(
        version=resolver.table.version,
        roles=[_role_response(resolver, role) for role in sorted(resolver.role_names())]
    )


@router.get("/roles/{role}", response_model=RoleResponse)
async def get_role(
    role: str,
    principal: Principal = Depends(require_permission(Permission.USER_READ)),
    resolver: PermissionResolver = Depends(get_permission_resolver)
):
    """Get a single role by name"""
    if not resolver.role_exists(role):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")
    return _role_response(resolver, role)


@router.get("/permissions", response_model=List[PermissionResponse])
async def list_permissions(
    resource: Optional[str] = None,
    principal: Principal = Depends(require_permission(Permission.USER_READ))
):
    """Permission catalog, optionally filtered by resource"""
    permissions = PERMISSION_MATRIX["permissions"]
    if resource:
        permissions = [p for p in permissions if p["resource"] == resource]
    return [PermissionResponse(**p) for p in permissions]


@router.get("/me/permissions", response_model=EffectivePermissionsResponse)
async def get_my_permissions(
    principal: Principal = Depends(get_current_principal),
    effective: Set[str] = Depends(get_effective_permissions),
    resolver: PermissionResolver = Depends(get_permission_resolver)
):
    """Effective permissions of the caller"""
    return EffectivePermissionsResponse(
        roles=sorted(principal.roles),
        permissions=sorted(effective),
        unknown_roles=sorted(principal.roles - resolver.role_names())
    )


@router.post("/check", response_model=PermissionCheckResponse)
async def check_permissions(
    check: PermissionCheckRequest,
    principal: Principal = Depends(get_current_principal),
    effective: Set[str] = Depends(get_effective_permissions),
    resolver: PermissionResolver = Depends(get_permission_resolver)
):
    """Evaluate an any/all requirement for the caller without rejecting the request"""
    if check.mode == "any":
        allowed = resolver.has_any_permission(effective, check.required)
    else:
        allowed = resolver.has_all_permissions(effective, check.required)
    return PermissionCheckResponse(
        allowed=allowed,
        mode=check.mode,
        required=check.required,
        missing=sorted(set(check.required) - effective)
    )


@router.post("/resolve", response_model=EffectivePermissionsResponse)
async def resolve_permissions(
    resolve_request: ResolveRequest,
    principal: Principal = Depends(require_all_permissions([Permission.USER_READ, Permission.USER_UPDATE])),
    resolver: PermissionResolver = Depends(get_permission_resolver)
):
    """Resolve the effective permissions of an arbitrary role/grant combination"""
    return EffectivePermissionsResponse(
        roles=sorted(set(resolve_request.roles)),
        permissions=sorted(resolver.resolve_permissions(resolve_request.roles, resolve_request.permissions)),
        unknown_roles=sorted(set(resolve_request.roles) - resolver.role_names())
    )
