"""Page/size query handling shared by admin list endpoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


class PaginationParams:
    """FastAPI dependency reading ``page`` and ``page_size`` from the query string."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="1-based page number"),
        page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Rows per page"),
    ):
        self.page = page
        self.page_size = page_size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def total_pages(self, total: int) -> int:
        return -(-total // self.page_size)


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int


async def paginate(
    db: AsyncSession,
    query: Select,
    params: PaginationParams,
    to_item: Callable[[Any], T],
) -> dict[str, Any]:
    """Run one page of an ordered ``query``; the result validates as a ``PaginatedResponse``."""
    total = (await db.execute(select(func.count()).select_from(query.order_by(None).subquery()))).scalar_one()
    rows = (await db.execute(query.limit(params.page_size).offset(params.offset))).scalars()

    return {
        "items": [to_item(row) for row in rows],
        "total": total,
        "page": params.page,
        "page_size": params.page_size,
        "total_pages": params.total_pages(total),
    }
