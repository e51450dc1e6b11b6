import pytest
from flask.testing import FlaskClient

from growth_projection.app import create_app


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app({"TESTING": True})
    with app.test_client() as test_client:
        yield test_client
