"""Accumulating field-level validation.

Every rule registered on a :class:`Validator` is checked right away against
the held object and its message is recorded on failure. Nothing
short-circuits, so a single call to :meth:`Validator.validate` reports all
violations at once::

    Validator(film) \\
        .between(lambda f: len(f.name), 1, 150, "invalid film name") \\
        .must(lambda f: f.rating >= 0, "invalid film rating") \\
        .validate()
"""
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """One or more rule violations, in registration order."""

    def __init__(self, messages: List[str]):
        super().__init__("\n".join(messages))
        self.messages = list(messages)

    def __iter__(self):
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


class Validator(Generic[T]):
    def __init__(self, obj: T):
        self._obj = obj
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def between(self, get_field: Callable[[T], int], start: int, end: int, message: str) -> "Validator[T]":
        """Inclusive range rule over an integer projection of the object."""
        return self.must(lambda obj: start <= get_field(obj) <= end, message)

    def must(self, predicate: Callable[[T], bool], message: str) -> "Validator[T]":
        if not predicate(self._obj):
            self._errors.append(message)
        return self

    def validate(self) -> None:
        if self._errors:
            raise ValidationError(self._errors)
