"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from contact_manager.app.core.config import Settings
from contact_manager.app.core.db import ContactStore
from contact_manager.app.main import create_app
from contact_manager.app.schemas.contact import ContactCreate
from contact_manager.app.services.contact_service import ContactService


VALID_PHONE = "08123456789"
OTHER_PHONE = "081234567890"


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway database file"""
    return Settings(database_url=str(tmp_path / "contacts.db"), secret_key="test-secret")


@pytest.fixture
def store(app_settings):
    """Open contact store, closed after the test"""
    contact_store = ContactStore(app_settings.database_url)
    contact_store.open()
    try:
        yield contact_store
    finally:
        contact_store.close()


@pytest.fixture
def service(store) -> ContactService:
    return ContactService(store)


@pytest.fixture
def client(app_settings):
    """Test client running the full application lifespan"""
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_payload():
    """Build a valid creation payload, overriding any field"""
    def _make(**overrides) -> ContactCreate:
        fields = {"name": "Ali", "email": "ali@x.com", "phone": VALID_PHONE}
        fields.update(overrides)
        return ContactCreate(**fields)
    return _make
