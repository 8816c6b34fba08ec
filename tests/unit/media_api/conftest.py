"""Shared fixtures for API tests: in-memory store and identity provider."""

import pytest
from fastapi.testclient import TestClient

from auth.identity import InMemoryIdentityProvider
from content.models import Role
from document_store.memory import InMemoryDocumentStore
from media_api.config import AppConfig, AuthConfig, StoreConfig
from media_api.main import create_app
from media_api.services import Services, build_services


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(store=StoreConfig(backend="memory"), auth=AuthConfig(backend="memory"))


@pytest.fixture
def services(config: AppConfig) -> Services:
    return build_services(config, store=InMemoryDocumentStore(), identity_provider=InMemoryIdentityProvider())


@pytest.fixture
def client(config: AppConfig, services: Services) -> TestClient:
    return TestClient(create_app(config, services))


@pytest.fixture
def viewer_headers(services: Services) -> dict:
    session = services.auth.sign_up("viewer@ucsd.edu", "secret1")
    return {"Authorization": f"Bearer {session.id_token}"}


@pytest.fixture
def admin_headers(services: Services) -> dict:
    session = services.auth.sign_up("admin@ucsd.edu", "secret1")
    services.users.set_role(session.user.uid, Role.ADMIN, is_admin=True)
    return {"Authorization": f"Bearer {session.id_token}"}
