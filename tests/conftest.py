import pytest


@pytest.fixture
def static_dirs(tmp_path):
    """Public and brand directories with distinct pages."""
    public = tmp_path / "public"
    brand = tmp_path / "brand"
    public.mkdir()
    brand.mkdir()
    (public / "demo.html").write_text("<html><body>dashboard page</body></html>")
    (public / "app.html").write_text("<html><body>main app page</body></html>")
    (public / "login.html").write_text("<html><body>login page</body></html>")
    (public / "styles.css").write_text("body { margin: 0; }")
    (brand / "logo.svg").write_text("<svg></svg>")
    return public, brand


@pytest.fixture
def app_config(static_dirs):
    """Standard AppConfig for testing."""
    from config import AppConfig
    public, brand = static_dirs
    return AppConfig(
        supabase_project_ref="abcd1234",
        supabase_anon_key="anon-key",
        perplexity_api_key="pplx-test-key",
        public_dir=public,
        brand_dir=brand
    )


@pytest.fixture
def upstream_client_builder():
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    return UpstreamClientBuilder()


@pytest.fixture
def mock_upstream_client(upstream_client_builder):
    """Upstream client replying with an empty JSON object."""
    return upstream_client_builder.build()


@pytest.fixture
def use_upstream_client(monkeypatch):
    """Route every upstream call through the given mock client."""
    def _use(client):
        monkeypatch.setattr(
            "utils.http_client.HTTPClientManager.get_upstream_client",
            lambda timeout=None: client
        )
        return client
    return _use


@pytest.fixture
def app_factory(app_config):
    """Build apps from the standard config, optionally overriding fields."""
    from main import create_app

    def _build(**overrides):
        return create_app(app_config.model_copy(update=overrides))
    return _build


@pytest.fixture
def configured_app(app_factory):
    """Pre-configured test client."""
    from fastapi.testclient import TestClient

    with TestClient(app_factory()) as client:
        yield client


@pytest.fixture
def recording_transport():
    from tests.fixtures.mock_clients import RecordingTransport
    return RecordingTransport()
