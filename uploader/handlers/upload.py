"""Обработчик загрузки файлов."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from uploader.models import ErrorResponse, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

# Имя поля формы с файлом
FILE_FIELD = "file"


@router.post(
    "",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}},
)
async def upload_file(request: Request) -> UploadResponse | JSONResponse:
    """Принять файл из multipart-формы.

    Файл нигде не сохраняется: сервер только записывает в журнал
    сведения о полученном файле.

    Args:
        request: Входящий запрос с телом multipart/form-data

    Returns:
        Сообщение об успешной загрузке или ответ 400,
        если поле ``file`` отсутствует

    """
    form = await request.form()
    received = form.get(FILE_FIELD)

    if not received:
        error = ErrorResponse(error="No file provided")
        return JSONResponse(status_code=400, content=error.model_dump())

    # Обычное текстовое поле тоже считается переданным значением
    if isinstance(received, UploadFile):
        logger.info(
            "Received file %r (%s, %s bytes)",
            received.filename,
            received.content_type,
            received.size,
        )
        await received.close()
    else:
        logger.info("Received form value in %r (%d chars)", FILE_FIELD, len(received))

    return UploadResponse(message="File uploaded successfully")
