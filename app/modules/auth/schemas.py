from pydantic import BaseModel, Field
from typing import List


class CurrentPrincipalResponse(BaseModel):
    user_id: str
    email: str
    roles: List[str] = Field(default_factory=list)
    granted_permissions: List[str] = Field(default_factory=list)
