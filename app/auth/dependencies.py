# =============================================================================
# app/auth/dependencies.py - Request Guards
# =============================================================================
# Provides dependency injection for the two request guards:
#
# - get_user:  succeeds when the request carries an Authorization header
# - get_admin: succeeds when get_user succeeds and the token is an admin token
#
# A guard that doesn't succeed "forwards": it returns None instead of failing
# the request, so a route can fall through to its next rank.
#
# Usage:
#   @router.get("/dashboard")
#   async def dashboard(user: Principal | None = Depends(get_user)):
#       if user is None:
#           ...
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.auth.models import Principal

logger = logging.getLogger(__name__)

# Raw Authorization header; a missing header forwards instead of answering 403
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

BEARER_PREFIX = "Bearer "


async def get_user(
    authorization: Optional[str] = Depends(authorization_header)
) -> Optional[Principal]:
    """
    User guard.

    Any Authorization header makes the caller a user. The token is the
    header value with the "Bearer " prefix removed, so "Bearer admin" and
    a bare "admin" carry the same token.

    Args:
        authorization: Raw Authorization header value, if sent

    Returns:
        Principal if an Authorization header was sent, None otherwise
    """
    if authorization is None:
        return None

    logger.debug("Request carries an Authorization header")
    return Principal(token=authorization.replace(BEARER_PREFIX, ""))


async def get_admin(
    user: Optional[Principal] = Depends(get_user)
) -> Optional[Principal]:
    """
    Admin guard.

    Returns:
        The same Principal as get_user if it is an administrator,
        None otherwise
    """
    if user is not None and user.is_admin:
        return user
    return None
