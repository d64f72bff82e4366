"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
Tests replace these through ``app.dependency_overrides``.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from campsite_api.application.services.campsite_service import CampsiteService
from campsite_api.di.container import get_container
from campsite_api.domain.auth.principal_resolver import PrincipalResolver
from campsite_api.domain.models.principal import Principal

# auto_error=False: missing credentials are reported by the resolver as 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_campsite_service() -> CampsiteService:
    """
    Get campsite service instance (singleton).

    Returns:
        CampsiteService instance
    """
    return get_container().get(CampsiteService)


def get_principal_resolver() -> PrincipalResolver:
    """
    Get principal resolver instance (singleton).

    Returns:
        PrincipalResolver instance
    """
    return get_container().get(PrincipalResolver)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    resolver: PrincipalResolver = Depends(get_principal_resolver),
) -> Principal:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        UnauthenticatedError: If no valid credentials were sent
    """
    token = credentials.credentials if credentials else None
    return resolver.resolve(token)
