"""
FastAPI application for the quote service.
Builds the app around a single QuoteStore owned for the process lifetime.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from store import QuoteStore
from utils import (
    api_logger, config_manager, ApiConfig, InvalidPayloadError, QuoteNotFoundError,
    create_error_response, __version__
)

from .routes import router
from .middleware import setup_middleware
from .models import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    api_logger.info(f"[API] Starting Quote Service API with {len(app.state.quote_store)} quotes...")
    yield
    # 数据只保存在内存中，关闭时直接丢弃
    api_logger.info(f"[API] Shutting down Quote Service API, discarding {len(app.state.quote_store)} quotes")


async def invalid_payload_handler(request: Request, exc: InvalidPayloadError) -> JSONResponse:
    api_logger.warning(f"[API] {request.method} {request.url.path} - {exc}")
    return JSONResponse(status_code=400, content=create_error_response(exc))


async def quote_not_found_handler(request: Request, exc: QuoteNotFoundError) -> JSONResponse:
    api_logger.warning(f"[API] {request.method} {request.url.path} - {exc} (id={exc.quote_id})")
    return JSONResponse(status_code=404, content=create_error_response(exc))


def create_app(store: Optional[QuoteStore] = None, api_config: Optional[ApiConfig] = None) -> FastAPI:
    """创建应用实例

    store 未提供时使用内置的初始语录新建一个；同一个 store 在应用的整个生命周期内共享。
    """
    api_config = api_config or config_manager.get_api_config()

    app = FastAPI(
        title="Quote Service API",
        description="In-memory CRUD service for quotes",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.quote_store = store if store is not None else QuoteStore()

    # 设置中间件
    setup_middleware(app, api_config)

    # 业务异常 -> HTTP 状态码
    app.add_exception_handler(InvalidPayloadError, invalid_payload_handler)
    app.add_exception_handler(QuoteNotFoundError, quote_not_found_handler)

    # 添加路由
    app.include_router(router)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check(request: Request):
        """健康检查端点"""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now().isoformat(),
            version=__version__,
            quotes=len(request.app.state.quote_store)
        )

    return app


app = create_app()


if __name__ == "__main__":
    api_config = config_manager.get_api_config()
    api_logger.info(f"[API] Starting server on {api_config.host}:{api_config.port}")

    # reload 模式需要以导入字符串方式启动
    if api_config.reload:
        uvicorn.run("api.app:app", host=api_config.host, port=api_config.port, reload=True, log_level="info")
    else:
        uvicorn.run(app, host=api_config.host, port=api_config.port, log_level="info")
