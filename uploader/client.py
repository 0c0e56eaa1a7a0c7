"""Типизированный клиент File Upload API."""

from types import TracebackType
from typing import TypeVar

import httpx
from pydantic import BaseModel

from uploader.models import HelloResponse, UploadResponse
from uploader.settings import get_settings

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigurationError(RuntimeError):
    """Не задана обязательная настройка."""


class ApiError(Exception):
    """API вернул ответ с кодом ошибки."""

    def __init__(self, status_code: int, error: str | None = None) -> None:
        self.status_code = status_code
        self.error = error
        super().__init__(f"API responded with {status_code}: {error or 'no details'}")


class ApiClient:
    """Клиент для маршрутов ``/hello`` и ``/upload``.

    Args:
        base_url: Адрес сервера API
        api_prefix: Базовый путь маршрутов
        transport: Транспорт httpx (используется в тестах)
        timeout: Таймаут запросов в секундах

    Raises:
        ConfigurationError: Если адрес сервера не задан

    """

    def __init__(
        self,
        base_url: str | None,
        *,
        api_prefix: str = "/api",
        transport: httpx.BaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not base_url:
            msg = "API_URL is not set"
            raise ConfigurationError(msg)

        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self._http = httpx.Client(
            base_url=self.base_url, transport=transport, timeout=timeout
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Закрыть HTTP-соединения клиента."""
        self._http.close()

    def hello(self) -> HelloResponse:
        """Вызвать ``GET /hello``."""
        response = self._http.get(f"{self.api_prefix}/hello")
        return self._parse(response, HelloResponse)

    def upload(
        self,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> UploadResponse:
        """Отправить файл на ``POST /upload``.

        Args:
            filename: Имя файла
            content: Содержимое файла
            content_type: MIME-тип файла

        Returns:
            Ответ сервера об успешной загрузке

        Raises:
            ApiError: Если сервер отклонил запрос

        """
        response = self._http.post(
            f"{self.api_prefix}/upload",
            files={"file": (filename, content, content_type)},
        )
        return self._parse(response, UploadResponse)

    @staticmethod
    def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            error = body.get("error") if isinstance(body, dict) else None
            raise ApiError(response.status_code, error)
        return model.model_validate(response.json())


def get_client() -> ApiClient:
    """Создать клиент по адресу из настроек ``API_URL``."""
    settings = get_settings()
    return ApiClient(settings.api_url, api_prefix=settings.api_prefix)
