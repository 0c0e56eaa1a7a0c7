"""Модели ответов API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Базовая модель с автоматическим преобразованием в camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HelloResponse(CamelCaseModel):
    """Ответ проверки доступности API."""

    message: str


class UploadResponse(CamelCaseModel):
    """Ответ на успешную загрузку файла."""

    message: str = Field(description="Сообщение о результате загрузки")


class ErrorResponse(CamelCaseModel):
    """Ответ с описанием ошибки."""

    error: str = Field(description="Описание ошибки")
