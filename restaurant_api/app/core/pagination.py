"""
Page requests.

A :class:`PageRequest` is built per call by either API surface and
passed through the service to the store, which uses ``offset``/``size``
to slice the ordered result set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .exceptions import InvalidArgumentError
from .sorting import Sort


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number, page size and sort directive."""

    page: int = 0
    size: int = 10
    sort: Sort = field(default_factory=Sort.default)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidArgumentError("Page index must not be less than zero")
        if self.size < 1:
            raise InvalidArgumentError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size


def total_pages(total_elements: int, size: int) -> int:
    """Number of pages needed to hold ``total_elements`` items.

    ``size`` is always positive here because ``PageRequest`` rejects
    anything below one.
    """
    return math.ceil(total_elements / size)
