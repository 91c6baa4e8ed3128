from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_principal
from app.modules.auth.schemas import CurrentPrincipalResponse
from app.modules.rbac.models import Principal

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=CurrentPrincipalResponse)
async def get_current_user_info(principal: Principal = Depends(get_current_principal)):
    """Get current principal as carried by the bearer token"""
    return CurrentPrincipalResponse(
        user_id=principal.subject,
        email=principal.email,
        roles=sorted(principal.roles),
        granted_permissions=sorted(principal.granted_permissions)
    )
