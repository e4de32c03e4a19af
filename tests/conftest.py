import pytest

from clientaddr.server import create_app


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "TRUST_PROXY_HEADERS": False})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def proxied_app():
    """App wrapped in ProxyFix trusting one X-Forwarded-For hop."""
    app = create_app({"TESTING": True, "TRUST_PROXY_HEADERS": True, "PROXY_FIX_X_FOR": 1})
    yield app


@pytest.fixture
def proxied_client(proxied_app):
    return proxied_app.test_client()
