"""Modüller için ortak yardımcılar: yanıtı modele çevirme, {success, data} zarfını açma."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote, urlencode

import pydantic

from tapsilat.core.errors import InvalidResponse, ValidationError
from tapsilat.schemas.common import ApiResponse

if TYPE_CHECKING:
    from tapsilat.client import TapsilatClient

M = TypeVar("M", bound=pydantic.BaseModel)


def parse_model(model_cls: type[M], data: Any) -> M:
    if data is None:
        raise InvalidResponse(f"Empty response for {model_cls.__name__}")
    try:
        return model_cls.model_validate(data)
    except pydantic.ValidationError as e:
        raise InvalidResponse(f"Failed to parse {model_cls.__name__} response: {e}") from e


def unwrap(model_cls: Any, data: Any, what: str) -> Any:
    """ApiResponse[model_cls] zarfından data'yı çıkarır; data yoksa mesajla InvalidResponse."""
    envelope = parse_model(ApiResponse[model_cls], data)
    if envelope.data is None:
        raise InvalidResponse(envelope.message or f"No {what} data in response")
    return envelope.data


def require_id(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} cannot be empty", value)
    return value.strip()


def path_id(value: str, label: str) -> str:
    """URL yolunda kullanılacak kimlik: boş olamaz, tek segment olarak kodlanır (/ ? & dahil)."""
    return quote(require_id(value, label), safe="")


def with_query(endpoint: str, **params: Any) -> str:
    """None olmayan parametreleri kodlayıp sorgu dizesi olarak ekler."""
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return f"{endpoint}?{query}" if query else endpoint


class BaseModule:
    def __init__(self, client: TapsilatClient) -> None:
        self.client = client

    def _request(self, method: str, endpoint: str, body: Any = None) -> Any:
        return self.client.make_request(method, endpoint, body)
