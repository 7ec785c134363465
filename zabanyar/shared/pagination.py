"""Limit/offset paging shared by list endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, computed_field

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class PaginationParams:
    limit: int
    offset: int


def get_pagination_params(
    limit: int = Query(default=12, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
) -> PaginationParams:
    """FastAPI dependency; the default fills one row-aligned grid of teacher cards."""
    return PaginationParams(limit=limit, offset=offset)


def get_limit_param(limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE)) -> int:
    """Cap for lists that are only read from the top, such as exercises."""
    return limit


class Page(BaseModel, Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

    @computed_field
    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total


def build_page(items: list[T], total: int, params: PaginationParams) -> Page[T]:
    return Page(items=items, total=total, limit=params.limit, offset=params.offset)
