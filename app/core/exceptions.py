from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity} {entity_id} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details={"entity": entity, "id": entity_id}
        )

class InvalidReferenceError(AppException):
    """Raised when a payload points at a level, skill or category that does not exist."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=422,
            error_code="INVALID_REFERENCE",
            details=details
        )

class GrowthAreaLimitError(AppException):
    def __init__(self, limit: int):
        super().__init__(
            message=(
                f"A team member can have a maximum of {limit} active growth areas. "
                "Mark an existing one as inactive first."
            ),
            status_code=409,
            error_code="GROWTH_AREA_LIMIT",
            details={"limit": limit}
        )
