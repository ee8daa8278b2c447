import pytest

from app.crm import create_app


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "test-secret")
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("CUSTOMERS_API_URL", "http://customers.test")
    monkeypatch.delenv("CUSTOMER_FORM_RESET_PENDING_ON_FAILURE", raising=False)

    app = create_app()
    return app.test_client()


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["ok"] is True


def test_healthz_ok(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_index_redirects_to_listing(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/customers")


def test_unknown_path_renders_404(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert b"Not found" in r.data


def test_production_requires_real_secret_key(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "change-me")
    with pytest.raises(RuntimeError):
        create_app()


def test_production_requires_api_url(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-strong-production-secret")
    monkeypatch.setenv("CUSTOMERS_API_URL", "")
    with pytest.raises(RuntimeError, match="CUSTOMERS_API_URL"):
        create_app()


def test_production_accepts_explicit_api_url(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-strong-production-secret")
    monkeypatch.setenv("CUSTOMERS_API_URL", "https://customers.example.com")
    app = create_app()
    assert app.extensions["customers_api"].base_url == "https://customers.example.com"


def test_development_defaults_to_local_api(monkeypatch):
    monkeypatch.setenv("ENV", "development")
    monkeypatch.delenv("CUSTOMERS_API_URL", raising=False)
    app = create_app()
    assert app.config["CUSTOMERS_API_URL"] == "http://localhost:3001"


@pytest.mark.parametrize("timeout", ["0", "-1", "abc"])
def test_invalid_api_timeout_rejected(monkeypatch, timeout):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("CUSTOMERS_API_TIMEOUT", timeout)
    with pytest.raises(RuntimeError, match="CUSTOMERS_API_TIMEOUT"):
        create_app()


def test_api_client_configured_from_env(monkeypatch):
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("CUSTOMERS_API_URL", "http://customers.test/api/")
    monkeypatch.setenv("CUSTOMERS_API_TIMEOUT", "3.5")
    app = create_app()
    api = app.extensions["customers_api"]
    assert api.base_url == "http://customers.test/api/"
    assert api.timeout_seconds == 3.5
