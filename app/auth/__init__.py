# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Header-based request guards plus the demo login page.
#
# Usage:
#   from app.auth import get_user, Principal
#
#   @router.get("/protected")
#   async def protected(user: Principal | None = Depends(get_user)):
#       return {"token": user.token if user else None}
# =============================================================================

from app.auth.dependencies import get_admin, get_user
from app.auth.models import Principal, TokenResponse

__all__ = [
    "get_admin",
    "get_user",
    "Principal",
    "TokenResponse",
]
