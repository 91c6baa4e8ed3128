import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_token_service
from app.core.resolver_provider import ResolverProvider
from app.main import app
from app.modules.auth.service import TokenService
from app.modules.rbac.loader import default_role_table
from app.modules.rbac.service import PermissionResolver

TEST_SECRET = "test-secret-key-for-rbac-tokens-0123456789"


@pytest.fixture
def table():
    return default_role_table()


@pytest.fixture
def resolver(table):
    return PermissionResolver(table)


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET, "HS256", 3600)


@pytest.fixture
def client(token_service):
    ResolverProvider.reset_resolver()
    app.dependency_overrides[get_token_service] = lambda: token_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    ResolverProvider.reset_resolver()


@pytest.fixture
def auth_headers(token_service):
    """Build bearer headers for a token with the given claims"""
    def _headers(role=None, roles=None, permissions=None, user_id="1", email="user@example.com"):
        token = token_service.issue_token(user_id, email, role=role, roles=roles, permissions=permissions)
        return {"Authorization": f"Bearer {token}"}
    return _headers
