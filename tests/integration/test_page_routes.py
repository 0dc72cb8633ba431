import pytest
from fastapi.testclient import TestClient

from tests.helpers import assert_error_body


@pytest.mark.parametrize("path, marker", [
    ("/", "dashboard page"),
    ("/app", "main app page"),
    ("/login", "login page"),
    ("/full", "main app page"),
])
def test_pages_serve_mapped_files(configured_app, path, marker):
    """Given the default configuration, each fixed path should serve its mapped HTML file."""
    response = configured_app.get(path)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert marker in response.text


def test_root_app_and_login_are_distinct(configured_app):
    bodies = {path: configured_app.get(path).text for path in ("/", "/app", "/login")}
    assert len(set(bodies.values())) == 3


def test_landing_page_is_configurable(app_factory):
    with TestClient(app_factory(landing_page="login.html")) as client:
        response = client.get("/")
    assert "login page" in response.text


def test_full_route_can_be_disabled(app_factory):
    with TestClient(app_factory(enable_full_route=False)) as client:
        response = client.get("/full")
    assert response.status_code == 404


def test_missing_page_file_returns_json_404(app_factory, static_dirs):
    public, _ = static_dirs
    (public / "login.html").unlink()

    with TestClient(app_factory()) as client:
        response = client.get("/login")

    assert_error_body(response, 404, "Page not found")


def test_static_and_brand_assets_are_served(configured_app):
    css = configured_app.get("/styles.css")
    logo = configured_app.get("/brand/logo.svg")

    assert css.status_code == 200
    assert "margin: 0" in css.text
    assert logo.status_code == 200
    assert logo.text == "<svg></svg>"


def test_missing_static_directory_is_skipped(app_factory, tmp_path):
    """Given a missing brand directory, the app should start and keep the other routes working."""
    with TestClient(app_factory(brand_dir=tmp_path / "nope")) as client:
        assert client.get("/").status_code == 200
        assert client.get("/api/config").status_code == 200
