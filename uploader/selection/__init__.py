"""Выбор файлов для загрузки: проверка, превью и события перетаскивания."""

from uploader.selection.controls import (
    ChangeEvent,
    DragEvent,
    Element,
    FileInput,
    ObjectUrlRegistry,
)
from uploader.selection.files import CandidateFile, FileEntry, LiveFile, RestoredFile
from uploader.selection.manager import (
    FileSelectionManager,
    FileSelectionOptions,
    FileSelectionState,
)
from uploader.selection.validation import format_bytes, validate_file

__all__ = [
    "CandidateFile",
    "ChangeEvent",
    "DragEvent",
    "Element",
    "FileEntry",
    "FileInput",
    "FileSelectionManager",
    "FileSelectionOptions",
    "FileSelectionState",
    "LiveFile",
    "ObjectUrlRegistry",
    "RestoredFile",
    "format_bytes",
    "validate_file",
]
