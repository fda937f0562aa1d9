from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator
from api.core.config import Settings, settings as default_settings
from api.core.middleware import RequestLoggingMiddleware, SimpleCORSMiddleware
from api.core.logger import logger, configure_logger
from api.routers import greeting


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    # LOG_LEVEL / LOG_FILE 반영
    configure_logger(logger, settings.LOG_LEVEL, settings.LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("SERVER_STARTED", extra={
            "project": settings.PROJECT_NAME,
            "port": settings.PORT,
            "metrics_enabled": settings.METRICS_ENABLED
        })
        yield
        logger.info("SERVER_SHUTDOWN")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="PostgreSQL KR - Greeting API",
        lifespan=lifespan
    )

    # 라우트 명시 등록 (GET / 하나)
    app.include_router(greeting.router, tags=["greeting"])

    # CORS 설정 (Origin 지정 시에만, 단순 GET 요청만 허용)
    if settings.CORS_ORIGINS:
        app.add_middleware(
            SimpleCORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_methods=["GET"],
        )

    # 요청 로깅 미들웨어
    app.add_middleware(RequestLoggingMiddleware)

    # Prometheus 메트릭 수집 (METRICS_ENABLED=true 일 때만 /metrics 노출)
    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app)

    return app


app = create_app()


def main(argv=None):
    # 프로세스 인자는 사용하지 않음
    uvicorn.run(
        "main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.RELOAD
    )


if __name__ == "__main__":
    main()
