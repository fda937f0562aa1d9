import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from api.core.logger import logger
from api.core.context import bind_request, unbind_request

TRACE_HEADER = "X-Trace-Id"


def get_client_ip(request: Request) -> str:
    # 프록시 뒤에서는 X-Forwarded-For 첫 번째 값이 실제 클라이언트
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "-"


def classify_status(status_code: int) -> tuple[int, str]:
    if status_code >= 500:
        return logging.ERROR, "SYSTEM_ERROR"
    if status_code >= 400:
        return logging.WARNING, "CLIENT_ERROR"
    return logging.INFO, "REQUEST_COMPLETED"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
        tokens = bind_request(trace_id, get_client_ip(request))
        try:
            started = time.perf_counter()
            response = await call_next(request)
            elapsed = round(time.perf_counter() - started, 4)

            response.headers[TRACE_HEADER] = trace_id

            level, event = classify_status(response.status_code)
            logger.log(level, event, extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration": elapsed
            })
            return response
        finally:
            # 요청 종료 후 컨텍스트 복원
            unbind_request(tokens)


class SimpleCORSMiddleware(CORSMiddleware):
    # 단순 GET 요청에만 CORS 헤더 부여, OPTIONS는 라우터로 넘겨 405 응답
    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
