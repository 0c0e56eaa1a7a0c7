"""
Тесты для типизированного клиента File Upload API.
"""

import httpx
import pytest

from uploader import client as client_module
from uploader.client import ApiClient, ApiError, ConfigurationError, get_client
from uploader.models import HelloResponse, UploadResponse


def make_transport(requests: list[httpx.Request]) -> httpx.MockTransport:
    """Создать транспорт, отвечающий как сервер API."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/api/hello":
            return httpx.Response(200, json={"message": "Hello FastAPI!"})
        if request.url.path == "/api/upload":
            if b'name="file"' not in request.read():
                return httpx.Response(400, json={"error": "No file provided"})
            return httpx.Response(200, json={"message": "File uploaded successfully"})
        return httpx.Response(404, text="Not Found")

    return httpx.MockTransport(handler)


@pytest.fixture
def requests():
    return []


@pytest.fixture
def api(requests):
    with ApiClient("http://api.test/", transport=make_transport(requests)) as client:
        yield client


class TestClientConfiguration:
    """Тесты для создания клиента."""

    @pytest.mark.parametrize("base_url", [None, ""])
    def test_missing_base_url_fails_fast(self, base_url):
        with pytest.raises(ConfigurationError, match="API_URL is not set"):
            ApiClient(base_url)

    def test_get_client_without_setting(self, monkeypatch):
        monkeypatch.delenv("API_URL", raising=False)
        client_module.get_settings.cache_clear()
        try:
            with pytest.raises(ConfigurationError):
                get_client()
        finally:
            client_module.get_settings.cache_clear()

    def test_get_client_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_URL", "http://localhost:9000")
        client_module.get_settings.cache_clear()
        try:
            with get_client() as api:
                assert api.base_url == "http://localhost:9000"
                assert api.api_prefix == "/api"
        finally:
            client_module.get_settings.cache_clear()

    def test_empty_prefix(self, requests):
        with ApiClient(
            "http://api.test", api_prefix="/", transport=make_transport(requests)
        ) as api:
            assert api.api_prefix == ""


class TestClientCalls:
    """Тесты для вызовов маршрутов."""

    def test_hello(self, api, requests):
        response = api.hello()

        assert response == HelloResponse(message="Hello FastAPI!")
        assert requests[0].method == "GET"
        assert str(requests[0].url) == "http://api.test/api/hello"

    def test_upload(self, api, requests):
        response = api.upload("notes.txt", b"hello", "text/plain")

        assert response == UploadResponse(message="File uploaded successfully")
        body = requests[0].read()
        assert requests[0].method == "POST"
        assert b'filename="notes.txt"' in body
        assert b"hello" in body

    def test_error_response_raises(self, requests):
        with ApiClient(
            "http://api.test", api_prefix="/missing", transport=make_transport(requests)
        ) as api:
            with pytest.raises(ApiError) as exc_info:
                api.hello()

        assert exc_info.value.status_code == 404
        assert exc_info.value.error is None

    def test_error_body_is_parsed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "No file provided"})

        with ApiClient("http://api.test", transport=httpx.MockTransport(handler)) as api:
            with pytest.raises(ApiError) as exc_info:
                api.upload("a.txt", b"")

        assert exc_info.value.status_code == 400
        assert exc_info.value.error == "No file provided"
        assert "No file provided" in str(exc_info.value)
