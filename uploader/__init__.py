"""Пакет приложения File Upload API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uploader.handlers import hello, upload
from uploader.settings import get_settings

settings = get_settings()

app = FastAPI(
    title="File Upload API",
    description="API with a health check and a file upload endpoint",
    version="1.0.0",
)

# Включение CORS для фронтенд-приложений
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение обработчиков под общим базовым путем
app.include_router(hello.router, prefix=settings.api_prefix)
app.include_router(upload.router, prefix=settings.api_prefix)

__all__ = ["app", "get_settings"]
