"""
Shared test fixtures: test client and sample inputs.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.schemas import ContactInfo


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def contact():
    """A complete contact form that passes every rule."""
    return ContactInfo(
        name="Dana Reyes",
        email="ops@hiltonportfolio.com",
        phone="5551234567",
        company="Harbor View Hotel",
    )


@pytest.fixture
def contact_payload():
    return {
        "name": "Dana Reyes",
        "email": "ops@hiltonportfolio.com",
        "phone": "5551234567",
        "company": "Harbor View Hotel",
    }
