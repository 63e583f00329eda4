"""
API data models for the quote service.
Pydantic models for request parsing and response serialization.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator

from store.models import Quote
from utils import InvalidPayloadError


_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class QuotePayload(BaseModel):
    """语录请求体

    只校验 JSON 结构与字段类型；未知字段忽略，缺失或为 null 的字段按空值处理。
    键名大小写不敏感（"Text" 等同于 "text"），完全匹配的键优先。
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictInt] = Field(None, ge=_INT64_MIN, le=_INT64_MAX, description="语录ID（创建与更新时忽略）")
    text: Optional[StrictStr] = Field(None, description="语录内容")
    author: Optional[StrictStr] = Field(None, description="作者")
    category: Optional[StrictStr] = Field(None, description="分类")
    color: Optional[StrictStr] = Field(None, description="展示用颜色标签")
    added_at: Optional[StrictStr] = Field(None, alias="addedAt", description="添加时间 (RFC3339)")

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        keys = {(field.alias or name).lower(): field.alias or name
                for name, field in cls.model_fields.items()}
        folded = {}
        for key, value in data.items():
            if key in keys.values():
                folded[key] = value
            elif key.lower() in keys and keys[key.lower()] not in data:
                folded[keys[key.lower()]] = value
        return folded

    def to_quote(self) -> Quote:
        return Quote(
            id=self.id or 0,
            text=self.text or "",
            author=self.author or "",
            category=self.category or "",
            color=self.color or "",
            added_at=self.added_at or "",
        )


class QuoteResponse(BaseModel):
    """语录响应模型"""
    id: int = Field(..., description="语录ID")
    text: str = Field(..., description="语录内容")
    author: str = Field(..., description="作者")
    category: str = Field(..., description="分类")
    color: str = Field(..., description="展示用颜色标签")
    addedAt: Optional[str] = Field(None, description="添加时间 (RFC3339)")

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(**quote.to_dict())


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str = Field(..., description="错误信息")


class HealthResponse(BaseModel):
    """健康检查响应模型"""
    status: str
    timestamp: str
    version: str
    quotes: int


def parse_quote_payload(body: bytes) -> Quote:
    """将原始请求体解析为语录，失败时抛出 InvalidPayloadError"""
    try:
        payload = QuotePayload.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(context={"errors": e.error_count()}) from e
    return payload.to_quote()
