"""Paging options for list operations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class Paging:
    """Page number and size sent as query parameters.

    The API has no continuation token: callers move between pages by
    advancing the page number themselves (see :meth:`next`).
    """

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @classmethod
    def ensure(cls, paging: Optional["Paging"]) -> "Paging":
        """Return ``paging``, or the default paging when it is ``None``."""
        return paging if paging is not None else cls()

    def first(self) -> "Paging":
        return replace(self, page_number=1)

    def next(self) -> "Paging":
        return replace(self, page_number=self.page_number + 1)

    def to_query_parameters(self) -> Dict[str, int]:
        return {"pageNumber": self.page_number, "pageSize": self.page_size}
