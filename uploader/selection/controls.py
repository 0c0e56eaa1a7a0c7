"""Возможности окружения, которыми пользуется менеджер выбора файлов.

Менеджер не обращается к элементам интерфейса напрямую: поле выбора
файлов, реестр превью и события перетаскивания передаются ему
окружением через интерфейсы из этого модуля. Здесь же лежат простые
реализации этих интерфейсов, пригодные для встраивания и тестов.
"""

import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from uploader.selection.files import LiveFile


class FileInputControl(Protocol):
    """Поле выбора файлов."""

    disabled: bool

    def reset(self) -> None:
        """Сбросить выбранное значение поля."""

    def open(self) -> None:
        """Открыть диалог выбора файлов."""


class PreviewRegistry(Protocol):
    """Реестр отзываемых ссылок на превью."""

    def create(self, file: LiveFile) -> str:
        """Создать ссылку на превью файла."""

    def revoke(self, preview: str) -> None:
        """Освободить ссылку на превью."""


class DropTarget(Protocol):
    """Область, в которую перетаскивают файлы."""

    def contains(self, node: object | None) -> bool:
        """Проверить, находится ли узел внутри области."""


class ObjectUrlRegistry:
    """Реестр превью в памяти, выдающий ссылки вида ``blob:<uuid>``."""

    def __init__(self) -> None:
        self.active: dict[str, LiveFile] = {}
        self.revoked: list[str] = []

    def create(self, file: LiveFile) -> str:
        preview = f"blob:{uuid.uuid4()}"
        self.active[preview] = file
        return preview

    def revoke(self, preview: str) -> None:
        if self.active.pop(preview, None) is None:
            msg = f"Preview {preview!r} is not active"
            raise KeyError(msg)
        self.revoked.append(preview)


@dataclass
class FileInput:
    """Простое поле выбора файлов.

    Хранит выбранные файлы и вызывает ``on_open`` при открытии диалога.
    """

    disabled: bool = False
    files: list[LiveFile] = field(default_factory=list)
    on_open: Callable[[], None] | None = None

    def reset(self) -> None:
        self.files = []

    def open(self) -> None:
        if self.on_open is not None:
            self.on_open()


@dataclass(eq=False)
class Element:
    """Узел дерева элементов, используемый как область перетаскивания."""

    children: list["Element"] = field(default_factory=list)

    def add(self, child: "Element") -> "Element":
        self.children.append(child)
        return child

    def contains(self, node: object | None) -> bool:
        """Проверить, является ли узел этим элементом или его потомком."""
        if node is None:
            return False
        if node is self:
            return True
        return any(child.contains(node) for child in self.children)


@dataclass
class DragEvent:
    """Событие перетаскивания над областью загрузки."""

    current_target: DropTarget
    related_target: object | None = None
    files: Sequence[LiveFile] = ()
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class ChangeEvent:
    """Событие изменения поля выбора файлов."""

    files: Sequence[LiveFile] = ()
