import pytest
from flask.testing import FlaskClient

from growthlab.app import create_app
from growthlab.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app()
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def short_horizon_client() -> FlaskClient:
    app = create_app(Settings(MAX_HORIZON_YEARS=5))
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
