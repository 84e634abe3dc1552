from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, Field
from datetime import datetime, timezone

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """
    Envelope for computed views (cadence, maturity report).
    Failures never use it: exception handlers render ``{"success": false, "errors": [...]}``.
    """
    success: bool = True
    data: Optional[T] = None
    metadata: Dict[str, Any] = {}
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def ok(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "ApiResponse[T]":
        return cls(data=data, metadata=metadata or {})
