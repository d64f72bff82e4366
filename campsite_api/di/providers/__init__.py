"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .campsite_provider import CampsiteProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "CampsiteProvider",
]
