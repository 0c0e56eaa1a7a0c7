"""Обработчик проверки доступности API."""

from fastapi import APIRouter

from uploader.models import HelloResponse

router = APIRouter(prefix="/hello", tags=["hello"])

HELLO_MESSAGE = "Hello FastAPI!"


@router.get("", response_model=HelloResponse)
async def hello() -> HelloResponse:
    """Вернуть приветственное сообщение."""
    return HelloResponse(message=HELLO_MESSAGE)
