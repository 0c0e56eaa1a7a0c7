"""Менеджер выбора файлов для загрузки."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import Field

from uploader.models import CamelCaseModel
from uploader.selection.controls import (
    ChangeEvent,
    DragEvent,
    FileInputControl,
    ObjectUrlRegistry,
    PreviewRegistry,
)
from uploader.selection.files import (
    FileEntry,
    LiveFile,
    RestoredFile,
    generate_file_id,
)
from uploader.selection.validation import (
    ACCEPT_ANY,
    DEFAULT_MAX_FILES,
    DEFAULT_MAX_SIZE,
    validate_file,
    validate_files_limit,
)

logger = logging.getLogger(__name__)

FilesCallback = Callable[[list[FileEntry]], None]


class FileSelectionOptions(CamelCaseModel):
    """Настройки менеджера выбора файлов."""

    max_files: int = Field(
        default=DEFAULT_MAX_FILES,
        ge=1,
        description="Максимальное число файлов, учитывается только при multiple",
    )
    max_size: int = Field(default=DEFAULT_MAX_SIZE, ge=0, description="Байты")
    accept: str = ACCEPT_ANY
    multiple: bool = False
    initial_files: list[RestoredFile] = Field(default_factory=list)

    @property
    def limits_count(self) -> bool:
        """Ограничение количества действует только при явной настройке."""
        return self.multiple and self.max_files != DEFAULT_MAX_FILES


class FileSelectionState(CamelCaseModel):
    """Снимок состояния менеджера."""

    files: list[FileEntry] = Field(default_factory=list)
    is_dragging: bool = False
    errors: list[str] = Field(default_factory=list)


class FileSelectionManager:
    """Список файлов, выбранных пользователем для загрузки.

    Менеджер проверяет файлы (размер, тип, количество, дубликаты),
    выдает и освобождает ссылки на превью и превращает события
    перетаскивания и поля выбора файлов в добавление и удаление
    записей. Каждая операция синхронно заменяет снимок состояния
    ``state`` новым.

    Args:
        options: Настройки менеджера
        on_files_change: Вызывается с полным списком после изменения
        on_files_added: Вызывается только с новыми записями до их
            добавления в состояние
        previews: Реестр ссылок на превью
        input_control: Поле выбора файлов, если оно уже есть

    """

    def __init__(
        self,
        options: FileSelectionOptions | None = None,
        *,
        on_files_change: FilesCallback | None = None,
        on_files_added: FilesCallback | None = None,
        previews: PreviewRegistry | None = None,
        input_control: FileInputControl | None = None,
    ) -> None:
        self.options = options or FileSelectionOptions()
        self.on_files_change = on_files_change
        self.on_files_added = on_files_added
        self.previews = previews if previews is not None else ObjectUrlRegistry()
        self.input_control = input_control

        self._state = FileSelectionState(
            files=[
                FileEntry(file=file, id=file.id, preview=file.url)
                for file in self.options.initial_files
            ]
        )

    @property
    def state(self) -> FileSelectionState:
        return self._state

    def bind_input(self, control: FileInputControl | None) -> None:
        """Привязать поле выбора файлов."""
        self.input_control = control

    def add_files(self, candidates: Iterable[LiveFile]) -> list[FileEntry]:
        """Добавить пакет выбранных файлов.

        Ошибки проверки не выбрасываются, а сохраняются в
        ``state.errors``. Превышение лимита количества отклоняет
        весь пакет целиком.

        Args:
            candidates: Выбранные файлы

        Returns:
            Записи, добавленные в состояние

        """
        batch = list(candidates)
        if not batch:
            return []

        self._update(errors=[])

        # В режиме одного файла новый файл всегда заменяет прежний
        if not self.options.multiple:
            self.clear_files()

        try:
            if self.options.limits_count:
                limit_error = validate_files_limit(
                    len(self._state.files), len(batch), self.options.max_files
                )
                if limit_error:
                    logger.debug("Rejected batch of %d files: %s", len(batch), limit_error)
                    self._update(errors=[limit_error])
                    return []

            added: list[FileEntry] = []
            errors: list[str] = []
            for file in batch:
                if self._is_duplicate(file):
                    continue
                error = validate_file(
                    file, max_size=self.options.max_size, accept=self.options.accept
                )
                if error:
                    logger.debug("Rejected file %r: %s", file.name, error)
                    errors.append(error)
                    continue
                added.append(self._create_entry(file))

            if added:
                self._notify(self.on_files_added, added)
                files = [*self._state.files, *added] if self.options.multiple else added
                self._update(files=files, errors=errors)
                self._notify(self.on_files_change, files)
            elif errors:
                self._update(errors=errors)

            return added
        finally:
            self._reset_input()

    def remove_file(self, file_id: str) -> FileEntry | None:
        """Удалить запись по идентификатору.

        Неизвестный идентификатор не считается ошибкой: список
        не меняется, но подписчик все равно получает уведомление.

        Returns:
            Удаленная запись или ``None``

        """
        removed = next((entry for entry in self._state.files if entry.id == file_id), None)
        if removed is not None:
            self._release_preview(removed)

        files = [entry for entry in self._state.files if entry.id != file_id]
        self._update(files=files, errors=[])
        self._notify(self.on_files_change, files)
        return removed

    def clear_files(self) -> None:
        """Удалить все записи и ошибки."""
        for entry in self._state.files:
            self._release_preview(entry)

        self._reset_input()
        self._update(files=[], errors=[])
        self._notify(self.on_files_change, [])

    def clear_errors(self) -> None:
        """Очистить список ошибок."""
        self._update(errors=[])

    def handle_drag_enter(self, event: DragEvent) -> None:
        event.prevent_default()
        event.stop_propagation()
        self._update(is_dragging=True)

    def handle_drag_over(self, event: DragEvent) -> None:
        event.prevent_default()
        event.stop_propagation()
        self._update(is_dragging=True)

    def handle_drag_leave(self, event: DragEvent) -> None:
        event.prevent_default()
        event.stop_propagation()

        # Переход между дочерними элементами области не считается уходом
        if event.current_target.contains(event.related_target):
            return

        self._update(is_dragging=False)

    def handle_drop(self, event: DragEvent) -> None:
        event.prevent_default()
        event.stop_propagation()
        self._update(is_dragging=False)

        if self.input_control is not None and self.input_control.disabled:
            return

        files = list(event.files)
        if not files:
            return
        self.add_files(files if self.options.multiple else files[:1])

    def handle_file_change(self, event: ChangeEvent) -> None:
        self.add_files(event.files)

    def open_file_dialog(self) -> None:
        """Открыть диалог выбора файлов привязанного поля."""
        if self.input_control is not None:
            self.input_control.open()

    def get_input_props(self, **overrides: Any) -> dict[str, Any]:
        """Получить атрибуты для поля выбора файлов.

        Переданные ``accept`` и ``multiple`` имеют приоритет над
        настройками менеджера, остальные атрибуты передаются как есть.
        """
        accept = overrides.get("accept") or self.options.accept
        multiple = overrides.get("multiple")
        return {
            **overrides,
            "type": "file",
            "on_change": self.handle_file_change,
            "accept": accept,
            "multiple": self.options.multiple if multiple is None else multiple,
            "ref": self.bind_input,
        }

    def _is_duplicate(self, file: LiveFile) -> bool:
        # Дубликаты отслеживаются только в режиме нескольких файлов
        if not self.options.multiple:
            return False
        return any(
            entry.file.name == file.name and entry.file.size == file.size
            for entry in self._state.files
        )

    def _create_entry(self, file: LiveFile) -> FileEntry:
        preview = self.previews.create(file) if file.is_image else None
        return FileEntry(file=file, id=generate_file_id(file), preview=preview)

    def _release_preview(self, entry: FileEntry) -> None:
        match entry.file:
            case LiveFile(is_image=True) if entry.preview:
                self.previews.revoke(entry.preview)
            case _:
                # Превью восстановленного файла указывает на загруженный файл
                pass

    def _reset_input(self) -> None:
        if self.input_control is not None:
            self.input_control.reset()

    def _update(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)

    @staticmethod
    def _notify(callback: FilesCallback | None, files: list[FileEntry]) -> None:
        if callback is not None:
            callback(list(files))
