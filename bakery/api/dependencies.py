"""
Shared FastAPI dependencies: database session, DI container and auth.
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from bakery.config.settings import get_settings
from bakery.core.container import DependencyContainer, get_container
from bakery.services.token_service import Principal, TokenService

logger = logging.getLogger(__name__)

_settings = get_settings()

# Tokens come from the external auth service; tokenUrl only documents that
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{_settings.API_PREFIX}/auth/token", auto_error=False)

_token_service: TokenService | None = None


def get_token_service() -> TokenService:
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service


def get_di_container() -> DependencyContainer:
    """Get Dependency Injection Container singleton."""
    return get_container()


async def get_optional_principal(
    token: str | None = Depends(oauth2_scheme),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
) -> Principal | None:
    """Caller identity when a bearer token is sent; guests get None. A bad token is still a 401."""
    if not token:
        return None
    return token_service.get_principal(token)


async def get_current_principal(
    principal: Principal | None = Depends(get_optional_principal),  # noqa: B008
) -> Principal:
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


async def require_admin(
    principal: Principal = Depends(get_current_principal),  # noqa: B008
) -> Principal:
    """Require the admin role claim; 403 otherwise."""
    if not principal.has_role(_settings.ADMIN_ROLE):
        logger.warning(f"Admin access denied for subject {principal.subject}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator role required",
        )
    return principal
