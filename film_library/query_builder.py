"""Builder for the single SELECT shape used by listing queries.

Fragments may be registered in any order but always render as::

    <base> [JOIN ...] [WHERE a AND b ...] [ORDER BY ...] LIMIT n OFFSET m

Values coming from the client never end up in the SQL text: predicates use
named placeholders (``:name``) and the values are collected in :attr:`params`
to be bound when the statement is executed.
"""
from typing import Any, Dict, List, Optional

from film_library.pagination import Pagination


class SelectQueryBuilder:
    def __init__(self, base: str):
        self._base = base.strip()
        self._joins: List[str] = []
        self._conditions: List[str] = []
        self._orders: List[str] = []
        self._params: Dict[str, Any] = {}
        self._pagination: Optional[Pagination] = None

    def join(self, clause: str) -> "SelectQueryBuilder":
        self._joins.append(f"JOIN {clause}")
        return self

    def left_join(self, clause: str) -> "SelectQueryBuilder":
        self._joins.append(f"LEFT JOIN {clause}")
        return self

    def where(self, condition: str, **params: Any) -> "SelectQueryBuilder":
        for name, value in params.items():
            if name in self._params and self._params[name] != value:
                raise ValueError(f"parameter {name!r} is already bound to a different value")
            self._params[name] = value
        self._conditions.append(condition)
        return self

    def order_by(self, field: str, direction: str = "asc") -> "SelectQueryBuilder":
        direction = "DESC" if (direction or "").lower() == "desc" else "ASC"
        self._orders.append(f"{field} {direction}")
        return self

    def add_pagination(self, pagination: Pagination) -> "SelectQueryBuilder":
        self._pagination = pagination
        return self

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    def build(self) -> str:
        if self._pagination is None:
            raise ValueError("pagination is required to build a select query")

        parts = [self._base, *self._joins]
        if self._conditions:
            parts.append("WHERE " + " AND ".join(self._conditions))
        if self._orders:
            parts.append("ORDER BY " + ", ".join(self._orders))
        parts.append(f"LIMIT {int(self._pagination.limit)}")
        parts.append(f"OFFSET {int(self._pagination.offset)}")
        return " ".join(parts)
