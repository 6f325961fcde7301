"""
Shared pieces of the domain model.

Response records are pydantic models validated straight from the
response text in strict mode: a missing required field, a field of the
wrong JSON type or malformed JSON raises ``pydantic.ValidationError``.
Unknown fields are ignored, since GitHub adds fields freely.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter


class GitHubModel(BaseModel):
    """Base of every record decoded from a GitHub response."""
    model_config = ConfigDict(frozen=True, extra='ignore', strict=True)


class RequestBody(BaseModel):
    """Base of every JSON request payload."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    def to_dict(self) -> Dict[str, Any]:
        """Payload with unset optional keys left out."""
        return self.model_dump(mode='json', exclude_none=True)


@dataclass(frozen=True)
class Pagination:
    """Page selection passed through as query parameters, unvalidated."""
    page: Optional[int] = None
    per_page: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params = {}
        if self.page is not None:
            params['page'] = str(self.page)
        if self.per_page is not None:
            params['per_page'] = str(self.per_page)
        return params


@lru_cache(maxsize=None)
def type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def json_decoder(tp: Any) -> Callable[[str], Any]:
    """
    Build a decoder turning a raw JSON response body into ``tp``.

    Example:
        json_decoder(List[User])('[{"id": 1, ...}]')
    """
    return type_adapter(tp).validate_json
