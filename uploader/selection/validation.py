"""Проверка выбранных файлов и форматирование размеров."""

from decimal import ROUND_HALF_UP, Decimal

from uploader.selection.files import LiveFile, RestoredFile

# Значения по умолчанию для менеджера выбора файлов
DEFAULT_MAX_FILES = 10
DEFAULT_MAX_SIZE = 10 * 1024 * 1024
ACCEPT_ANY = "*"

BYTES_BASE = 1024
BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(num_bytes: float, decimals: int = 2) -> str:
    """Преобразовать количество байт в читаемую строку.

    Выбирается наибольшая единица, в которой значение не меньше 1.
    Округление выполняется до ``decimals`` знаков, незначащие нули
    отбрасываются.

    Args:
        num_bytes: Количество байт
        decimals: Число знаков после запятой

    Returns:
        Строка вида ``"1.5 KB"``

    Raises:
        ValueError: Если количество байт отрицательное

    """
    if num_bytes < 0:
        msg = f"Byte count must not be negative: {num_bytes}"
        raise ValueError(msg)
    if num_bytes == 0:
        return "0 Bytes"

    unit = 0
    while unit < len(BYTE_UNITS) - 1 and num_bytes >= BYTES_BASE ** (unit + 1):
        unit += 1

    places = Decimal(1).scaleb(-max(decimals, 0))
    scaled = (Decimal(num_bytes) / Decimal(BYTES_BASE**unit)).quantize(
        places, rounding=ROUND_HALF_UP
    )
    return f"{scaled.normalize():f} {BYTE_UNITS[unit]}"


def validate_file_size(file: LiveFile | RestoredFile, max_size: int) -> str | None:
    """Проверить, что файл не превышает допустимый размер."""
    if file.size > max_size:
        return (
            f'File "{file.name}" exceeds the maximum size of {format_bytes(max_size)}.'
        )
    return None


def matches_accept_rule(file: LiveFile | RestoredFile, rule: str) -> bool:
    """Проверить файл по одному правилу из списка ``accept``.

    Правило может быть расширением (``.png``), маской MIME-типа
    (``image/*``) или точным MIME-типом (``image/jpeg``).
    """
    if rule.startswith("."):
        return file.extension.lower() == rule.lower()
    if rule.endswith("/*"):
        base_type = rule.split("/")[0]
        return file.type.startswith(f"{base_type}/")
    return file.type == rule


def validate_file_type(file: LiveFile | RestoredFile, accept: str) -> str | None:
    """Проверить, что тип файла входит в список допустимых."""
    if accept == ACCEPT_ANY:
        return None

    rules = [rule.strip() for rule in accept.split(",")]
    if any(matches_accept_rule(file, rule) for rule in rules):
        return None
    return f'File "{file.name}" is not an accepted file type.'


def validate_file(
    file: LiveFile | RestoredFile,
    *,
    max_size: int = DEFAULT_MAX_SIZE,
    accept: str = ACCEPT_ANY,
) -> str | None:
    """Проверить размер и тип файла.

    Тип проверяется только для файлов допустимого размера.

    Returns:
        Сообщение об ошибке или ``None``, если файл подходит

    """
    return validate_file_size(file, max_size) or validate_file_type(file, accept)


def validate_files_limit(current_count: int, new_count: int, max_files: int) -> str | None:
    """Проверить, что пакет файлов не превысит допустимое количество."""
    if current_count + new_count > max_files:
        return f"You can only upload a maximum of {max_files} files."
    return None
