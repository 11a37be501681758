"""Cursor generation and validation.

A cursor is a tuple holding one value per sort key, in the same order as the
ORDER BY clause used to fetch the records. Cursors compare by value, so a
record's cursor can be checked against a caller-supplied one with ``==``.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

Cursor = Tuple[Any, ...]

CursorGenerator = Callable[[Any], Sequence[Any]]
CursorValidator = Callable[[Any], bool]
Predicate = Callable[[Any], bool]


def as_cursor(value: Any) -> Any:
    """Normalise a list into a tuple so cursors compare by value."""
    if isinstance(value, list):
        return tuple(value)
    return value


def _field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record[key]
    try:
        return getattr(record, key)
    except AttributeError:
        raise KeyError(key) from None


def generate_cursor(keys: Sequence[str], record: Any) -> Cursor:
    """Generate a cursor for a record from the given sort keys.

    Args:
        keys: Field names, in ORDER BY order
        record: A mapping or an object exposing the fields as attributes

    Returns:
        Tuple of the record's values for ``keys``

    Raises:
        KeyError: If the record lacks one of the keys
    """
    return tuple(_field(record, key) for key in keys)


def validate_cursor(cursor: Any, predicates: Sequence[Predicate]) -> bool:
    """Check a cursor against one predicate per position.

    A cursor of the wrong length, or anything that is not a list or tuple,
    is invalid. An empty cursor is valid against an empty predicate list.
    """
    if not isinstance(cursor, (list, tuple)):
        return False
    if len(cursor) != len(predicates):
        return False
    return all(test(value) for value, test in zip(cursor, predicates))


def _accept_any(value: Any) -> bool:
    return True


class CursorPolicy(BaseModel):
    """How cursors are produced from records and checked when untrusted."""

    generator: CursorGenerator = Field(description="Maps a record to its cursor")
    validator: CursorValidator = Field(description="Accepts or rejects a caller-supplied cursor")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_keys(
        cls,
        keys: Sequence[str],
        predicates: Optional[Sequence[Predicate]] = None
    ) -> "CursorPolicy":
        """Build a policy from sort keys and per-key predicates.

        When no predicates are given every value is accepted, but the cursor
        must still have one value per key.
        """
        keys = tuple(keys)
        if predicates is None:
            predicates = (_accept_any,) * len(keys)
        predicates = tuple(predicates)
        if len(predicates) != len(keys):
            raise ValueError(
                f"Expected {len(keys)} cursor predicates, got {len(predicates)}"
            )

        return cls(
            generator=lambda record: generate_cursor(keys, record),
            validator=lambda cursor: validate_cursor(cursor, predicates)
        )

    def generate(self, record: Any) -> Cursor:
        """Return the cursor of a record."""
        return as_cursor(self.generator(record))

    def validate(self, cursor: Any) -> bool:
        """Return whether a cursor is acceptable for bounding a fetch."""
        return bool(self.validator(cursor))
