"""
API routes for the quote service.
Maps the five quote verbs onto QuoteStore operations.
"""

import re
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from store import QuoteStore
from utils import LogContext
from .models import QuoteResponse, ErrorResponse, parse_quote_payload

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Quote not found"}}
INVALID_BODY_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid request body"}}


def get_quote_store(request: Request) -> QuoteStore:
    """从应用状态中取出语录存储"""
    return request.app.state.quote_store


def parse_quote_id(raw: str) -> int:
    """解析路径中的 id

    取开头的十进制整数（"12abc" -> 12）；无法解析或超出 int64 时返回 0，
    0 不对应任何语录，最终表现为 404 而不是 400。
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return 0
    value = int(match.group(1))
    if value < _INT64_MIN or value > _INT64_MAX:
        return 0
    return value


@router.get("/quotes", response_model=List[QuoteResponse],
            response_model_exclude_none=True, tags=["Quotes"])
async def list_quotes(store: QuoteStore = Depends(get_quote_store)):
    """获取全部语录"""
    return [QuoteResponse.from_quote(quote) for quote in store.list_quotes()]


@router.get("/quotes/{quote_id}", response_model=QuoteResponse,
            response_model_exclude_none=True, responses=NOT_FOUND_RESPONSE, tags=["Quotes"])
async def get_quote(quote_id: str, store: QuoteStore = Depends(get_quote_store)):
    """根据ID获取语录"""
    quote = store.get_quote(parse_quote_id(quote_id))
    return QuoteResponse.from_quote(quote)


@router.post("/quotes", status_code=201, response_model=QuoteResponse,
             response_model_exclude_none=True, responses=INVALID_BODY_RESPONSE, tags=["Quotes"])
async def create_quote(request: Request, store: QuoteStore = Depends(get_quote_store)):
    """新增语录，id 与添加时间由服务端生成"""
    candidate = parse_quote_payload(await request.body())

    with LogContext("API", "create_quote"):
        quote = store.create_quote(candidate)

    return QuoteResponse.from_quote(quote)


@router.put("/quotes/{quote_id}", response_model=QuoteResponse, response_model_exclude_none=True,
            responses={**INVALID_BODY_RESPONSE, **NOT_FOUND_RESPONSE}, tags=["Quotes"])
async def update_quote(quote_id: str, request: Request,
                       store: QuoteStore = Depends(get_quote_store)):
    """整体替换语录（未提供的字段会被清空）"""
    candidate = parse_quote_payload(await request.body())
    target_id = parse_quote_id(quote_id)

    with LogContext("API", "update_quote", {"id": target_id}):
        quote = store.update_quote(target_id, candidate)

    return QuoteResponse.from_quote(quote)


@router.delete("/quotes/{quote_id}", status_code=204, response_class=Response,
               responses=NOT_FOUND_RESPONSE, tags=["Quotes"])
async def delete_quote(quote_id: str, store: QuoteStore = Depends(get_quote_store)):
    """删除语录"""
    target_id = parse_quote_id(quote_id)

    with LogContext("API", "delete_quote", {"id": target_id}):
        store.delete_quote(target_id)

    return Response(status_code=204)
