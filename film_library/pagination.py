"""Page/size normalization and listing filters."""
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_PAGE_SIZE = 10

QUERY_PAGE_NAME = "page"
QUERY_PAGE_SIZE_NAME = "size"
QUERY_FILM_NAME = "film"
QUERY_ACTOR_NAME = "actor"
QUERY_ORDER_BY_NAME = "sort"
QUERY_DIRECTION_NAME = "direct"

ALLOWED_FILM_SORT_FIELDS = frozenset({"name", "rating", "release_date"})
DEFAULT_SORT_BY = "rating"
DEFAULT_SORT_DIRECTION = "desc"
SORT_DIRECTIONS = ("asc", "desc")


def parse_int(value: Optional[str]) -> Optional[int]:
    """Integer query value, or None when it is missing or not a number."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class Pagination:
    """A page number and a page size, both at least 1.

    Missing or non-positive values fall back to page 1 and ``default_size``.
    ``max_size`` caps the page size when set; by default there is no cap.
    """

    def __init__(
        self,
        page: Optional[int] = None,
        size: Optional[int] = None,
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: Optional[int] = None,
    ):
        self.page = page if page is not None and page > 0 else 1
        self.size = size if size is not None and size > 0 else default_size
        if max_size is not None and self.size > max_size:
            self.size = max_size

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def get_limit(self) -> int:
        return self.limit

    def get_offset(self) -> int:
        return self.offset

    def __eq__(self, other):
        if not isinstance(other, Pagination):
            return NotImplemented
        return (self.page, self.size) == (other.page, other.size)

    def __repr__(self):
        return f"Pagination(page={self.page}, size={self.size})"


@dataclass
class FilmFilter:
    pagination: Pagination = field(default_factory=Pagination)
    name_contains: str = ""
    actor_name_contains: str = ""
    order_by: str = ""
    direction: str = ""

    def validate(self) -> "FilmFilter":
        """Replace unsupported sort settings with the defaults."""
        if self.order_by not in ALLOWED_FILM_SORT_FIELDS:
            self.order_by = DEFAULT_SORT_BY
            self.direction = DEFAULT_SORT_DIRECTION
        direction = (self.direction or "").lower()
        self.direction = direction if direction in SORT_DIRECTIONS else "asc"
        return self


@dataclass
class ActorFilter:
    pagination: Pagination = field(default_factory=Pagination)
    full_name_contains: str = ""
