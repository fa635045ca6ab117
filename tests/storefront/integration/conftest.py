import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(stores):
    from storefront.api.application import create_app

    return TestClient(create_app(), follow_redirects=False)


@pytest.fixture()
def signed_in(client):
    """Register (and thereby sign in) a shopper on the test client."""
    response = client.post(
        "/auth/register",
        json={
            "name": "Jane Doe",
            "email": "jane@example.com",
            "password": "s3cret-pw",
            "confirm_password": "s3cret-pw",
        },
    )
    assert response.status_code == 201
    return response.json()
