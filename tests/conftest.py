import copy
from typing import Dict, Iterable, List, Optional

import jwt
import pytest
from fastapi.testclient import TestClient

from campsite_api.api.v1.dependencies import get_campsite_service, get_principal_resolver
from campsite_api.application.services.campsite_service import CampsiteService
from campsite_api.domain.exceptions import ConcurrentModificationError, NotFoundError
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.models.user import User
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository, DeletionReport
from campsite_api.domain.repositories.user_repository import UserRepository
from campsite_api.infrastructure.auth.jwt_principal_resolver import JwtConfig, JwtPrincipalResolver
from campsite_api.main import app

SIGNING_KEY = "test-signing-key-0123456789abcdef-0123456789"


class InMemoryCampsiteRepository(CampsiteRepository):
    """Stores copies so callers only see their changes after a save."""

    def __init__(self) -> None:
        self._docs: Dict[str, Campsite] = {}

    def create(self, campsite: Campsite) -> Campsite:
        campsite.version = 0
        self._docs[campsite.id] = copy.deepcopy(campsite)
        return campsite

    def save(self, campsite: Campsite) -> Campsite:
        stored = self._docs.get(campsite.id)
        if stored is None:
            raise NotFoundError(f"Campsite {campsite.id} not found")
        if stored.version != campsite.version:
            raise ConcurrentModificationError(campsite.id, campsite.version)
        campsite.version += 1
        self._docs[campsite.id] = copy.deepcopy(campsite)
        return campsite

    def find_by_id(self, campsite_id: str) -> Optional[Campsite]:
        stored = self._docs.get(campsite_id)
        return copy.deepcopy(stored) if stored else None

    def find_all(self) -> List[Campsite]:
        return [copy.deepcopy(c) for c in self._docs.values()]

    def delete_by_id(self, campsite_id: str) -> DeletionReport:
        removed = self._docs.pop(campsite_id, None)
        return DeletionReport(acknowledged=True, deleted_count=1 if removed else 0)

    def delete_all(self) -> DeletionReport:
        count = len(self._docs)
        self._docs.clear()
        return DeletionReport(acknowledged=True, deleted_count=count)


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users = {u.id: u for u in users}
        self.batch_calls = 0

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        self.batch_calls += 1
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}


@pytest.fixture()
def users():
    return {
        "admin": User(id="admin-1", username="admin", first_name="Ada", last_name="Min", admin=True),
        "u1": User(id="user-1", username="jenny", first_name="Jenny", last_name="Lake"),
        "u2": User(id="user-2", username="tomas", first_name="Tomas", last_name="Ridge"),
    }


@pytest.fixture()
def principals(users):
    return {key: Principal(user_id=user.id, is_admin=user.admin) for key, user in users.items()}


@pytest.fixture()
def campsite_repository():
    return InMemoryCampsiteRepository()


@pytest.fixture()
def user_repository(users):
    return InMemoryUserRepository(users.values())


@pytest.fixture()
def service(campsite_repository, user_repository):
    return CampsiteService(campsite_repository=campsite_repository, user_repository=user_repository)


@pytest.fixture()
def principal_resolver(user_repository):
    return JwtPrincipalResolver(JwtConfig(signing_key=SIGNING_KEY), user_repository)


def make_token(user_id: str, key: str = SIGNING_KEY, **claims) -> str:
    return jwt.encode({"sub": user_id, **claims}, key, algorithm="HS256")


@pytest.fixture()
def token_factory():
    return make_token


@pytest.fixture()
def auth_headers(users):
    """Bearer headers per user key."""
    return {key: {"Authorization": f"Bearer {make_token(user.id)}"} for key, user in users.items()}


@pytest.fixture()
def client(service, principal_resolver):
    app.dependency_overrides[get_campsite_service] = lambda: service
    app.dependency_overrides[get_principal_resolver] = lambda: principal_resolver
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def campsite(service, principals):
    """A stored campsite with no comments."""
    return service.create(
        {"name": "React Lake Campground", "description": "Foothills of the Chrome Mountains", "elevation": 1233},
        principals["admin"],
    )
