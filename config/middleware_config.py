import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # 요청 로그 (쿼리에는 API 키가 없으므로 그대로 남김)
        logger.info(f"✅ REQUEST → {request.method} {request.url.path} {request.url.query}")

        response: Response = await call_next(request)

        logger.info(f"✅ RESPONSE ← {request.method} {request.url.path}  Status: {response.status_code}")

        return response


def setup_middleware(app: FastAPI):
    app.add_middleware(LoggingMiddleware)
    # 브라우저 클라이언트용: 모든 origin 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
