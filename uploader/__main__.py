"""Точка входа для запуска приложения File Upload API."""

import logging

import uvicorn

from uploader import app, get_settings

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(app, host=settings.host, port=settings.port)
