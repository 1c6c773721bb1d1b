"""Integration tests for serving the built frontend."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from foundershub.main import mount_frontend, register_exception_handlers


@pytest.fixture
def frontend_client(tmp_path):
    build = tmp_path / "build"
    (build / "assets").mkdir(parents=True)
    (build / "index.html").write_text("<html>hub</html>")
    (build / "assets" / "app.js").write_text("console.log('hub')")
    (build / "favicon.ico").write_text("icon")
    (tmp_path / "secret.txt").write_text("do not serve")

    app = FastAPI()
    register_exception_handlers(app)
    mount_frontend(app, str(build))
    return TestClient(app)


@pytest.mark.integration
class TestFrontend:
    def test_root_serves_index(self, frontend_client):
        response = frontend_client.get("/")
        assert response.status_code == 200
        assert "hub" in response.text

    def test_assets_and_files(self, frontend_client):
        assert frontend_client.get("/assets/app.js").text == "console.log('hub')"
        assert frontend_client.get("/favicon.ico").text == "icon"

    def test_client_routes_fall_back_to_index(self, frontend_client):
        response = frontend_client.get("/profile/42")
        assert response.status_code == 200
        assert response.text == "<html>hub</html>"

    def test_api_paths_are_not_served(self, frontend_client):
        response = frontend_client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_traversal_does_not_escape_build(self, frontend_client):
        response = frontend_client.get("/..%2Fsecret.txt")
        assert "do not serve" not in response.text
