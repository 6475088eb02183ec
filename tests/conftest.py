import pytest

from secret_santa import create_app


@pytest.fixture
def app():
    return create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "WTF_CSRF_ENABLED": False,
            "SANTA_SEED": 7,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()
