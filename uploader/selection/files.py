"""Модели файлов, выбранных для загрузки."""

import random
import string
import time
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from uploader.models import CamelCaseModel

# Алфавит base36 для случайного суффикса идентификатора
ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
ID_SUFFIX_LENGTH = 7


class LiveFile(BaseModel):
    """Файл, выбранный пользователем и еще никуда не загруженный."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["live"] = "live"
    name: str
    size: int = Field(ge=0, description="Размер файла в байтах")
    type: str = Field(default="", description="MIME-тип файла")
    content: bytes = Field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, name: str, content: bytes, type: str = "") -> "LiveFile":  # noqa: A002
        """Создать файл из содержимого в памяти."""
        return cls(name=name, size=len(content), type=type, content=content)

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    @property
    def is_image(self) -> bool:
        return self.type.startswith("image/")


class RestoredFile(CamelCaseModel):
    """Метаданные ранее загруженного файла."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["restored"] = "restored"
    name: str
    size: int = Field(ge=0, description="Размер файла в байтах")
    type: str = Field(description="MIME-тип файла")
    url: str = Field(description="Адрес загруженного файла")
    id: str = Field(description="Идентификатор, выданный при загрузке")

    @property
    def extension(self) -> str:
        return extension_of(self.name)


CandidateFile = Annotated[LiveFile | RestoredFile, Field(discriminator="kind")]


class FileEntry(CamelCaseModel):
    """Файл в списке выбранных вместе с идентификатором и превью."""

    model_config = ConfigDict(frozen=True)

    file: CandidateFile
    id: str
    preview: str | None = None


def extension_of(name: str) -> str:
    """Получить расширение файла с точкой.

    Для имени без точки расширением считается все имя целиком.
    """
    return "." + name.rsplit(".", 1)[-1]


def generate_file_id(file: LiveFile | RestoredFile) -> str:
    """Получить идентификатор для записи о файле.

    Для выбранного файла идентификатор составляется из имени,
    времени в миллисекундах и случайного суффикса. Восстановленный
    файл сохраняет идентификатор, выданный при загрузке.
    """
    match file:
        case LiveFile(name=name):
            suffix = "".join(random.choices(ID_SUFFIX_ALPHABET, k=ID_SUFFIX_LENGTH))  # noqa: S311
            return f"{name}-{time.time_ns() // 1_000_000}-{suffix}"
        case RestoredFile(id=file_id):
            return file_id
