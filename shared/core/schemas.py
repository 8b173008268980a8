from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Shared properties
T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for wire models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JsonOutResult(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc))


class PageResponse(CamelModel, Generic[T]):
    content: List[T]
    total_elements: int
    total_pages: int
    size: int
    number: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def build(cls, content: List[T], total: int, page: int, size: int):
        total_pages = (total + size - 1) // size if size else 0
        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            size=size,
            number=page,
            first=page == 0,
            last=page + 1 >= total_pages,
            empty=len(content) == 0,
        )
