from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class PermissionResponse(BaseModel):
    name: str
    resource: str
    action: str
    description: Optional[str] = None


class RoleResponse(BaseModel):
    name: str
    description: Optional[str] = None
    permissions: List[str]


class RoleTableResponse(BaseModel):
    version: str
    roles: List[RoleResponse]


class ResolveRequest(BaseModel):
    roles: List[str] = Field(default_factory=list)
    permissions: List[str] = Field(default_factory=list)


class EffectivePermissionsResponse(BaseModel):
    roles: List[str]
    permissions: List[str]
    unknown_roles: List[str] = Field(default_factory=list)


class PermissionCheckRequest(BaseModel):
    required: List[str]
    mode: Literal["any", "all"] = "all"


class PermissionCheckResponse(BaseModel):
    allowed: bool
    mode: str
    required: List[str]
    missing: List[str]
