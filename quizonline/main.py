# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения QuizOnline.
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

from quizonline.api.v1.questions import router as questions_router
from quizonline.clients.database_client import (check_connection, close_db,
                                                init_db)
from quizonline.config.logger import configure_logger, get_system_logger
from quizonline.config.settings import settings
from quizonline.config.uvicorn_config import setup_uvicorn_logging
from quizonline.utils.exceptions import (ErrorCode, NotFoundError,
                                         ValidationError)
from quizonline.utils.startup_banner import print_startup_banner

logger = configure_logger()
system_logger = get_system_logger()

app = FastAPI(
    title="Quiz Online API",
    description="API для управления вопросами викторин",
    version="0.1.0",
    openapi_tags=[
        {"name": "❓ Вопросы - ➕ Создание", "description": "Создание вопросов"},
        {"name": "❓ Вопросы - 📖 Чтение", "description": "Получение вопросов и предметов"},
        {"name": "❓ Вопросы - ✏️ Обновление", "description": "Обновление вопросов"},
        {"name": "❓ Вопросы - 🗑️ Удаление", "description": "Удаление вопросов"},
        {"name": "🧪 Викторина", "description": "Случайный набор вопросов для пользователя"},
    ],
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request: Request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)

        if request.url.path.startswith("/api/"):
            if response.status_code >= 400:
                logger.warning(
                    f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
                )
            else:
                logger.info(
                    f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
                )

        return response

    except Exception as e:
        if request.url.path.startswith("/api/"):
            logger.error(
                f"💥 Критическая ошибка API: {request.method} {request.url.path}"
            )
            logger.exception(f"Детали ошибки: {e}")
        raise


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    # Тело ответа не передается
    logger.debug(exc.detail)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error_code": exc.error_code,
            "fields": exc.fields,
        },
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    fields = []
    for error in exc.errors():
        location = [
            str(part)
            for part in error.get("loc", ())
            if part not in ("body", "query", "path")
        ]
        name = ".".join(location) or "body"
        if name not in fields:
            fields.append(name)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Некорректные данные запроса",
            "error_code": ErrorCode.VALIDATION_ERROR,
            "fields": fields,
        },
    )


app.include_router(questions_router, prefix="/api/quizzes")


@app.on_event("startup")
async def startup_event():
    # Перехватываем логи uvicorn и SQLAlchemy
    setup_uvicorn_logging()

    print_startup_banner()

    system_logger.info("🔧 Инициализация сервисов...")

    try:
        await check_connection()
        system_logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise

    if settings.create_tables_on_startup:
        await init_db()
        system_logger.info("✅ Таблицы созданы")

    system_logger.info("🎉 Все сервисы готовы к работе!")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения"""
    system_logger.info("🛑 Завершение работы Quiz Online API")
    await close_db()


@app.get("/api/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok", "version": app.version}


if __name__ == "__main__":
    import uvicorn

    from quizonline.config.uvicorn_config import get_uvicorn_config

    uvicorn.run(**get_uvicorn_config())
