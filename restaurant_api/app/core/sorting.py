"""
Sort directives and the compact ``"field,direction"`` parser.

Both API surfaces accept a sort string such as ``"name,desc"`` and turn
it into a :class:`Sort` with :func:`parse_sort`.  The parser is strict
about the direction token but permissive about the overall shape: any
string that does not split into exactly two tokens yields the default
ordering (ascending by ``id``).  A fallback therefore does not mean the
input was well formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .exceptions import InvalidArgumentError

DEFAULT_SORT_PROPERTY = "id"


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse ``value`` case-insensitively.

        Raises ``InvalidArgumentError`` for anything other than
        ``asc``/``desc``.  Surrounding whitespace is not stripped.
        """
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid value '{value}' for orders given; "
                "Has to be either 'desc' or 'asc' (case insensitive)"
            ) from None


@dataclass(frozen=True)
class Order:
    """A single (property, direction) pair."""

    property: str
    direction: Direction = Direction.ASC

    @property
    def ascending(self) -> bool:
        return self.direction is Direction.ASC


@dataclass(frozen=True)
class Sort:
    """Ordered sequence of :class:`Order` entries."""

    orders: Tuple[Order, ...]

    @classmethod
    def by(cls, *orders: Order) -> "Sort":
        return cls(tuple(orders))

    @classmethod
    def default(cls) -> "Sort":
        return cls.by(Order(DEFAULT_SORT_PROPERTY, Direction.ASC))

    def __iter__(self):
        return iter(self.orders)


def parse_sort(sort: str) -> Sort:
    """Build a :class:`Sort` from a ``"field,direction"`` string.

    - ``"name,desc"`` -> name descending
    - ``"name,DESC"`` -> name descending
    - ``"garbage"``, ``""``, ``"a,b,c"`` -> id ascending
    - ``"name,sideways"`` -> ``InvalidArgumentError``

    The field name is passed through verbatim; mapping it onto a real
    column is the store's job.
    """
    tokens = sort.split(",")
    # Trailing empty tokens are dropped, so "name," counts as one token.
    while tokens and tokens[-1] == "":
        tokens.pop()

    if len(tokens) == 2:
        prop, direction = tokens
        return Sort.by(Order(prop, Direction.from_string(direction)))

    return Sort.default()
