"""
Shared schema building blocks: camelCase JSON models and the response envelope.
"""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base schema serialized with camelCase keys.
    Accepts both camelCase and snake_case on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope: ``{success, data?, message?}``."""

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None


class ErrorResponse(CamelModel):
    """Error envelope: ``{success: false, error, message?, requestId?}``."""

    success: bool = False
    error: str
    message: Optional[str] = None
    request_id: Optional[str] = None

    def to_content(self) -> dict:
        """JSON body with unset optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
