"""
Тесты для проверки файлов и форматирования размеров.
"""

import pytest

from uploader.selection.files import LiveFile, RestoredFile, extension_of
from uploader.selection.validation import (
    DEFAULT_MAX_SIZE,
    format_bytes,
    validate_file,
    validate_file_type,
    validate_files_limit,
)


def make_file(name: str, size: int = 100, type: str = "") -> LiveFile:  # noqa: A002
    return LiveFile(name=name, size=size, type=type)


class TestFormatBytes:
    """Тесты для форматирования размеров."""

    @pytest.mark.parametrize(
        ("num_bytes", "decimals", "expected"),
        [
            (0, 2, "0 Bytes"),
            (1, 2, "1 Bytes"),
            (1000, 2, "1000 Bytes"),
            (1024, 2, "1 KB"),
            (1536, 1, "1.5 KB"),
            (1536, 0, "2 KB"),
            (1234567, 2, "1.18 MB"),
            (10 * 1024 * 1024, 2, "10 MB"),
            (1024**3, 2, "1 GB"),
            (1024**8, 2, "1 YB"),
            (1024**9, 2, "1024 YB"),
        ],
    )
    def test_format_bytes(self, num_bytes, decimals, expected):
        """Проверить выбор единицы и округление."""
        assert format_bytes(num_bytes, decimals) == expected

    def test_negative_decimals_treated_as_zero(self):
        """Проверить, что отрицательная точность считается нулевой."""
        assert format_bytes(1536, -1) == "2 KB"

    def test_half_rounds_up(self):
        """Проверить округление половины в большую сторону."""
        # 1.125 KB точно представимо в двоичной форме
        assert format_bytes(1152, 2) == "1.13 KB"

    def test_negative_bytes_rejected(self):
        """Проверить, что отрицательный размер отклоняется."""
        with pytest.raises(ValueError, match="must not be negative"):
            format_bytes(-1)


class TestValidateFile:
    """Тесты для проверки размера и типа файла."""

    def test_file_within_limits(self):
        """Проверить, что подходящий файл проходит проверку."""
        assert validate_file(make_file("a.txt", 10, "text/plain")) is None

    def test_file_at_exact_size_limit(self):
        """Проверить, что файл ровно максимального размера допустим."""
        assert validate_file(make_file("a.bin", 1000), max_size=1000) is None

    def test_file_too_large(self):
        """Проверить сообщение о превышении размера."""
        error = validate_file(make_file("big.bin", 2048), max_size=1024)
        assert error == 'File "big.bin" exceeds the maximum size of 1 KB.'

    def test_default_size_limit_in_message(self):
        """Проверить форматирование лимита по умолчанию."""
        error = validate_file(make_file("huge.iso", DEFAULT_MAX_SIZE + 1))
        assert error == 'File "huge.iso" exceeds the maximum size of 10 MB.'

    def test_size_checked_before_type(self):
        """Проверить, что при ошибке размера тип не проверяется."""
        error = validate_file(
            make_file("big.gif", 2048, "image/gif"), max_size=1024, accept=".png"
        )
        assert error is not None
        assert "exceeds the maximum size" in error

    def test_type_rejected(self):
        """Проверить сообщение о недопустимом типе."""
        error = validate_file(make_file("a.gif", 10, "image/gif"), accept=".png")
        assert error == 'File "a.gif" is not an accepted file type.'


class TestAcceptRules:
    """Тесты для правил допустимых типов."""

    def test_any_type_accepted(self):
        """Проверить, что '*' принимает любой файл."""
        assert validate_file_type(make_file("noext"), "*") is None

    @pytest.mark.parametrize(
        ("name", "type_", "accept"),
        [
            ("photo.png", "", ".png"),
            ("PHOTO.PNG", "", ".png"),
            ("photo.png", "", ".PNG"),
            ("photo.jpg", "image/jpeg", "image/*"),
            ("photo.jpg", "image/jpeg", "image/jpeg"),
            ("photo.jpg", "image/jpeg", ".png, image/jpeg"),
            ("doc.pdf", "application/pdf", "image/*,application/pdf"),
        ],
    )
    def test_accepted(self, name, type_, accept):
        """Проверить совпадение по расширению, маске и точному типу."""
        assert validate_file_type(make_file(name, type=type_), accept) is None

    @pytest.mark.parametrize(
        ("name", "type_", "accept"),
        [
            ("photo.gif", "image/gif", ".png,image/jpeg"),
            ("notes.txt", "text/plain", "image/*"),
            ("photo.jpg", "image/jpeg", "image/png"),
            ("archive.tar.gz", "", ".tar"),
            ("photo.jpg", "", "image/*"),
        ],
    )
    def test_rejected(self, name, type_, accept):
        """Проверить, что файл без совпадений отклоняется."""
        assert validate_file_type(make_file(name, type=type_), accept) is not None

    def test_restored_file_validated_by_its_type(self):
        """Проверить проверку восстановленного файла."""
        restored = RestoredFile(
            name="avatar.png", size=10, type="image/png", url="/a.png", id="a1"
        )
        assert validate_file_type(restored, "image/*") is None


class TestExtension:
    """Тесты для определения расширения."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("photo.png", ".png"),
            ("archive.tar.gz", ".gz"),
            ("README", ".README"),
            (".env", ".env"),
        ],
    )
    def test_extension_of(self, name, expected):
        """Проверить, что расширением считается часть после последней точки."""
        assert extension_of(name) == expected


class TestFilesLimit:
    """Тесты для ограничения количества файлов."""

    def test_within_limit(self):
        assert validate_files_limit(1, 1, 2) is None

    def test_over_limit(self):
        assert (
            validate_files_limit(2, 1, 2)
            == "You can only upload a maximum of 2 files."
        )
