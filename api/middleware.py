"""
Middleware for the quote service API.
Provides CORS, request logging and last-resort error handling.
"""

import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from utils import api_logger, ApiConfig


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        api_logger.debug(f"[API] {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        api_logger.info(f"[API] {request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")

        # 添加处理时间到响应头
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """错误处理中间件

    业务异常由应用注册的异常处理器转换，这里只兜底未预期的异常。
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            api_logger.error(f"[API] Unexpected error on {request.method} {request.url.path}: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"}
            )


def setup_cors(app: FastAPI, api_config: ApiConfig):
    """设置CORS"""
    cors_origins = list(api_config.cors_origins)

    if "*" in cors_origins:
        api_logger.warning("[CORS] Using wildcard origin")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


def setup_middleware(app: FastAPI, api_config: ApiConfig):
    """设置所有中间件"""
    # 后添加的在外层；CORS 放在最外层，500 响应也带上跨域头
    app.add_middleware(ErrorHandlingMiddleware)
    if api_config.log_requests:
        app.add_middleware(LoggingMiddleware)
    setup_cors(app, api_config)

    api_logger.info("[API] Middleware setup completed")
